"""Graph ports - Abstractions for the road network.

These protocols define the contract between the road network and the
front-ends that drive it, such as the interactive shell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Road, ShortestPathOutcome

# Maps intersection name -> roads leaving it
Adjacency = Mapping[str, Sequence["Road"]]


class RoadNetworkPort(Protocol):
    """Port for building and querying a road network.

    Implementation: graph/road_network.py (RoadNetwork)
    """

    def add_intersection(self, name: str) -> None:
        """Add an intersection; adding an existing one has no effect."""
        ...

    def add_road(self, start: str, end: str, weight: int) -> None:
        """Connect two existing intersections in both directions.

        Raises:
            UnknownNodeError: If either endpoint was never added.
        """
        ...

    def find_shortest_path(self, start: str, end: str) -> ShortestPathOutcome:
        """Find the minimum-distance route between two intersections.

        Returns:
            RouteResult on success, NoPathFound if ``end`` is unreachable.

        Raises:
            UnknownNodeError: If ``start`` or ``end`` was never added.
        """
        ...

    def has_cycle(self) -> bool:
        """Return True if any connected component contains a cycle."""
        ...
