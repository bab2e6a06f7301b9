"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    DuplicateNodeError,
    InvalidWeightError,
    RouteFinderError,
    UnknownNodeError,
)
from .models import Edge, RouteRecord, RouteResult, RouteTrend

__all__ = [
    # Models
    "Edge",
    "RouteResult",
    "RouteRecord",
    "RouteTrend",
    # Errors
    "RouteFinderError",
    "DuplicateNodeError",
    "UnknownNodeError",
    "InvalidWeightError",
]
