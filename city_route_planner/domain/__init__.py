"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import InvalidWeightError, RoutePlannerError, UnknownNodeError
from .models import NoPathFound, Road, RouteResult, ShortestPathOutcome

__all__ = [
    # Models
    "Road",
    "RouteResult",
    "NoPathFound",
    "ShortestPathOutcome",
    # Errors
    "RoutePlannerError",
    "UnknownNodeError",
    "InvalidWeightError",
]
