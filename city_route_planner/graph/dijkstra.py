"""Shortest-path computation using Dijkstra's algorithm.

This module computes the minimum-distance route between two
intersections of a road network with non-negative integer distances.
"""

import heapq
import math
from typing import Dict, List, Set, Tuple, Union

from ..domain.errors import UnknownNodeError
from ..domain.models import NoPathFound, RouteResult, ShortestPathOutcome
from ..ports.graph import Adjacency


def dijkstra(graph: Adjacency, start: str, end: str) -> ShortestPathOutcome:
    """Compute the shortest route between two intersections.

    Parameters
    ----------
    graph:
        Adjacency mapping as held by ``RoadNetwork``.
    start:
        Name of the departure intersection.
    end:
        Name of the arrival intersection.

    Returns
    -------
    RouteResult or NoPathFound
        The ordered intersection names from ``start`` to ``end``
        (inclusive) with the total distance, or ``NoPathFound`` when
        ``end`` cannot be reached from ``start``.

    Raises
    ------
    UnknownNodeError
        If ``start`` or ``end`` is not an intersection of ``graph``.

    Notes
    -----
    Stale queue entries are skipped when popped rather than removed when
    a shorter distance is found, so a node may sit in the heap several
    times.
    """
    for name in (start, end):
        if name not in graph:
            raise UnknownNodeError(f"Unknown intersection: {name}", node_name=name)

    distances: Dict[str, Union[int, float]] = {node: math.inf for node in graph}
    previous: Dict[str, str] = {}
    distances[start] = 0

    heap: List[Tuple[Union[int, float], str]] = [(0, start)]
    visited: Set[str] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        for road in graph[u]:
            v = road.destination
            if v in visited:
                continue
            new_distance = current_distance + road.weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    if distances[end] == math.inf:
        return NoPathFound(start=start, end=end)

    path: List[str] = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])

    path.reverse()
    return RouteResult(path=tuple(path), total_distance=int(distances[end]))
