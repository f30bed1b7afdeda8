from city_route_planner.domain.errors import (
    InvalidWeightError,
    RoutePlannerError,
    UnknownNodeError,
)


def test_errors_share_base_class():
    assert issubclass(UnknownNodeError, RoutePlannerError)
    assert issubclass(InvalidWeightError, RoutePlannerError)
    assert issubclass(RoutePlannerError, Exception)


def test_message_and_cause():
    cause = KeyError("Z")
    error = UnknownNodeError("Unknown intersection: Z", node_name="Z", cause=cause)

    assert error.node_name == "Z"
    assert error.cause is cause
    assert str(error) == "Unknown intersection: Z: 'Z'"
    assert str(UnknownNodeError("Unknown intersection: Z")) == "Unknown intersection: Z"
