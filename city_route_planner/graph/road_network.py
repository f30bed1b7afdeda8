"""In-memory road network of intersections and bidirectional roads.

The network only grows: intersections and roads are added, never
removed or edited. It is a plain single-owner value and is not safe to
share between threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from ..config import GraphConfig, get_config
from ..domain.errors import InvalidWeightError, UnknownNodeError
from ..domain.models import NoPathFound, Road, ShortestPathOutcome
from .cycles import has_cycle
from .dijkstra import dijkstra


@dataclass
class RoadNetwork:
    """Weighted undirected graph of named intersections.

    This class implements RoadNetworkPort. Each road is stored twice,
    once in the adjacency list of each endpoint, with the same distance.

    Attributes:
        config: Graph configuration (weight validation policy)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _adjacency: Dict[str, List[Road]] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def __contains__(self, name: object) -> bool:
        return name in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    # --- Construction ---------------------------------------------------------

    def add_intersection(self, name: str) -> None:
        """Add an intersection. Adding an existing name has no effect."""
        if name in self._adjacency:
            self._logger.debug("Intersection already present", extra={"node": name})
            return
        self._adjacency[name] = []
        self._logger.debug("Intersection added", extra={"node": name})

    def add_road(self, start: str, end: str, weight: int) -> None:
        """Connect two existing intersections in both directions.

        Duplicate roads are kept as parallel entries.

        Args:
            start: Name of one endpoint.
            end: Name of the other endpoint.
            weight: Road distance.

        Raises:
            UnknownNodeError: If ``start`` or ``end`` was never added.
            InvalidWeightError: If ``weight`` is not an integer, or is
                negative while the configuration rejects negative weights.
        """
        self._require(start)
        self._require(end)
        self._validate_weight(weight)

        self._adjacency[start].append(Road(destination=end, weight=weight))
        self._adjacency[end].append(Road(destination=start, weight=weight))
        self._logger.debug(
            "Road added",
            extra={"start": start, "end": end, "weight": weight},
        )

    # --- Queries --------------------------------------------------------------

    def find_shortest_path(self, start: str, end: str) -> ShortestPathOutcome:
        """Find the minimum-distance route between two intersections.

        Returns:
            RouteResult with the path and its total distance, or
            NoPathFound when ``end`` is unreachable from ``start``.

        Raises:
            UnknownNodeError: If ``start`` or ``end`` was never added.
        """
        self._logger.debug(
            "Solving route",
            extra={"start": start, "end": end},
        )
        self._require(start)
        self._require(end)

        outcome = dijkstra(self._adjacency, start, end)

        if isinstance(outcome, NoPathFound):
            self._logger.info(
                "No route found",
                extra={"start": start, "end": end},
            )
        else:
            self._logger.info(
                "Route found",
                extra={
                    "start": start,
                    "end": end,
                    "stops": outcome.num_stops,
                    "distance": outcome.total_distance,
                },
            )
        return outcome

    def has_cycle(self) -> bool:
        """Return True if any connected component contains a cycle."""
        result = has_cycle(self._adjacency)
        self._logger.info(
            "Cycle check done",
            extra={"nodes": len(self._adjacency), "has_cycle": result},
        )
        return result

    def intersections(self) -> List[str]:
        """Return intersection names in insertion order."""
        return list(self._adjacency)

    def roads_from(self, name: str) -> tuple[Road, ...]:
        """Return the roads leaving an intersection.

        Raises:
            UnknownNodeError: If ``name`` was never added.
        """
        self._require(name)
        return tuple(self._adjacency[name])

    @property
    def road_count(self) -> int:
        """Number of undirected roads, parallel roads counted separately."""
        # Self loops are stored twice in the same list, like any other road
        return sum(len(roads) for roads in self._adjacency.values()) // 2

    # --- Validation -----------------------------------------------------------

    def _require(self, name: str) -> None:
        if name not in self._adjacency:
            self._logger.warning("Unknown intersection", extra={"node": name})
            raise UnknownNodeError(f"Unknown intersection: {name}", node_name=name)

    def _validate_weight(self, weight: int) -> None:
        if isinstance(weight, bool) or not isinstance(weight, int):
            self._logger.warning("Rejected road distance", extra={"weight": weight})
            raise InvalidWeightError(
                f"Distance must be an integer, got {weight!r}",
                weight=weight,
            )
        if weight < 0 and self.config.reject_negative_weights:
            self._logger.warning("Rejected road distance", extra={"weight": weight})
            raise InvalidWeightError(
                f"Distance must not be negative, got {weight}",
                weight=weight,
            )
