"""Immutable domain models for the City Route Planner.

All models are frozen dataclasses with slots. They have no external
dependencies and describe roads and the outcome of route queries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Road:
    """One direction of a road, as stored in an adjacency list.

    Attributes:
        destination: Name of the intersection the road leads to
        weight: Distance of the road
    """

    destination: str
    weight: int


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Shortest route between two intersections.

    Attributes:
        path: Ordered intersection names from start to end (inclusive)
        total_distance: Sum of the road distances along the path
    """

    path: tuple[str, ...]
    total_distance: int

    @property
    def start(self) -> str:
        return self.path[0]

    @property
    def end(self) -> str:
        return self.path[-1]

    @property
    def num_stops(self) -> int:
        """Return the number of intersections on the route."""
        return len(self.path)

    def describe(self, separator: str = " -> ") -> str:
        """Render the path as ``A -> B -> C``."""
        return separator.join(self.path)


@dataclass(frozen=True, slots=True)
class NoPathFound:
    """The end intersection is not reachable from the start.

    This is a normal query result, not an error.
    """

    start: str
    end: str


ShortestPathOutcome = Union[RouteResult, NoPathFound]
