"""Cycle detection on the undirected road network.

A depth-first traversal is run from every intersection not reached by
an earlier traversal, remembering the intersection each one was entered
from. Meeting an already visited intersection other than that parent
closes a cycle.

The traversal keeps its own stack of frames instead of recursing, so
long chains of roads cannot exhaust the interpreter's recursion limit.
"""

from typing import Iterator, List, Optional, Set, Tuple

from ..domain.models import Road
from ..ports.graph import Adjacency

_Frame = Tuple[str, Optional[str], Iterator[Road]]


def has_cycle(graph: Adjacency) -> bool:
    """Return True if any connected component of ``graph`` has a cycle.

    Two roads joining the same pair of intersections, and a road from an
    intersection to itself, both count as cycles.
    """
    visited: Set[str] = set()
    for node in graph:
        if node not in visited and _component_has_cycle(graph, node, visited):
            return True
    return False


def _component_has_cycle(graph: Adjacency, root: str, visited: Set[str]) -> bool:
    visited.add(root)
    stack: List[_Frame] = [(root, None, iter(graph[root]))]

    while stack:
        node, parent, roads = stack[-1]
        road = next(roads, None)
        if road is None:
            stack.pop()
            continue

        neighbour = road.destination
        if neighbour not in visited:
            visited.add(neighbour)
            stack.append((neighbour, node, iter(graph[neighbour])))
        elif neighbour != parent:
            return True

    return False
