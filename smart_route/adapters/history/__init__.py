"""History adapters - Implementations of the RouteHistoryPort.

Available implementations:
- InMemoryRouteHistory: Thread-safe in-memory log with trend aggregation
"""

from .memory_history import InMemoryRouteHistory

__all__ = ["InMemoryRouteHistory"]
