"""Top-level package for the City Route Planner.

The package maintains a small in-memory network of intersections joined
by weighted two-way roads, answers shortest-path and cycle queries on it,
and ships an interactive menu to drive it from a terminal.
"""

from .domain import (
    InvalidWeightError,
    NoPathFound,
    Road,
    RoutePlannerError,
    RouteResult,
    UnknownNodeError,
)
from .graph import RoadNetwork

__all__ = [
    "RoadNetwork",
    "Road",
    "RouteResult",
    "NoPathFound",
    "RoutePlannerError",
    "UnknownNodeError",
    "InvalidWeightError",
]
