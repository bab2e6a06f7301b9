"""History port - Log of computed routes and their trends.

Persistence is out of scope for the core; implementations keep
records for the lifetime of the process only.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RouteRecord, RouteTrend


class RouteHistoryPort(Protocol):
    """Port for the route history log.

    Implementation: adapters/history/memory_history.py (InMemoryRouteHistory)
    """

    def record(
        self,
        start: str,
        end: str,
        total: float,
        time: Optional[datetime] = None,
    ) -> RouteRecord:
        """Append a computed route to the log.

        Args:
            start: Departure intersection.
            end: Arrival intersection.
            total: Total weight of the route.
            time: Optional timestamp (defaults to now, UTC).

        Returns:
            The stored record.
        """
        ...

    def recent(self, limit: Optional[int] = None) -> Sequence[RouteRecord]:
        """Return the most recent records, newest first."""
        ...

    def trends(self) -> Sequence[RouteTrend]:
        """Return average totals grouped by ``start → end``."""
        ...

    def clear(self) -> int:
        """Drop every record.

        Returns:
            Number of records that were cleared.
        """
        ...
