"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the road network and the code that
drives it. They make the shell testable against any implementation.
"""

from .graph import Adjacency, RoadNetworkPort

__all__ = [
    "Adjacency",
    "RoadNetworkPort",
]
