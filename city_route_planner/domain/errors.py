"""Typed domain errors for the City Route Planner.

Every error raised by the road network inherits from RoutePlannerError,
so front-ends (the interactive shell, tests) can catch a single type,
report it and carry on instead of crashing.

All errors can optionally wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoutePlannerError(Exception):
    """Base error for the route planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownNodeError(RoutePlannerError):
    """An operation referenced an intersection that was never added.

    Raised by road insertion with a missing endpoint and by shortest-path
    queries with a missing start or end.

    Attributes:
        node_name: The intersection name that was not found
    """

    node_name: str = ""


@dataclass
class InvalidWeightError(RoutePlannerError):
    """A road distance was rejected.

    Distances must be integers; negative distances are refused unless
    the graph configuration allows them.

    Attributes:
        weight: The rejected value
    """

    weight: object = None
