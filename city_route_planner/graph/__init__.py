"""Road network graph and the algorithms that run on it.

This subpackage holds the in-memory network of intersections and roads,
Dijkstra's shortest-path search and undirected cycle detection.
"""

from .cycles import has_cycle
from .dijkstra import dijkstra
from .road_network import RoadNetwork

__all__ = ["RoadNetwork", "dijkstra", "has_cycle"]
