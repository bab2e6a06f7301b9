"""Thread-safe in-memory route history.

Keeps the log of computed routes for the lifetime of the process and
aggregates it into per-route trends (average total, sample count).
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from ...domain.models import RouteRecord, RouteTrend


@dataclass
class InMemoryRouteHistory:
    """In-memory route history with optional size cap.

    This history implements the RouteHistoryPort protocol.

    Attributes:
        recent_limit: Default number of records returned by ``recent()``
        max_entries: Maximum number of records kept (None = unlimited);
            the oldest record is evicted first

    Example:
        history = InMemoryRouteHistory(recent_limit=10)
        history.record("A", "D", 3.0)
        history.trends()  # [RouteTrend("A", "D", 3.0, 1)]
    """

    recent_limit: int = 10
    max_entries: Optional[int] = None

    _records: List[RouteRecord] = field(default_factory=list, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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
        entry = RouteRecord(
            start=start,
            end=end,
            total=total,
            time=time or datetime.now(timezone.utc),
        )
        with self._lock:
            if self.max_entries is not None and len(self._records) >= self.max_entries:
                evicted = self._records.pop(0)
                self._logger.debug(
                    "History evicted record",
                    extra={"start": evicted.start, "end": evicted.end},
                )
            self._records.append(entry)
        self._logger.debug(
            "Route recorded", extra={"start": start, "end": end, "total": total}
        )
        return entry

    def recent(self, limit: Optional[int] = None) -> List[RouteRecord]:
        """Return the most recent records, newest first.

        Args:
            limit: Maximum number of records (defaults to ``recent_limit``).
        """
        count = self.recent_limit if limit is None else limit
        if count <= 0:
            return []
        with self._lock:
            return list(reversed(self._records[-count:]))

    def trends(self) -> List[RouteTrend]:
        """Return average totals grouped by ``start → end``.

        Groups appear in the order their first record was logged.
        Averages are rounded to two decimals.
        """
        with self._lock:
            groups: Dict[Tuple[str, str], List[float]] = {}
            for entry in self._records:
                groups.setdefault((entry.start, entry.end), []).append(entry.total)

        return [
            RouteTrend(
                start=start,
                end=end,
                average=round(sum(totals) / len(totals), 2),
                samples=len(totals),
            )
            for (start, end), totals in groups.items()
        ]

    def clear(self) -> int:
        """Drop every record.

        Returns:
            Number of records that were cleared.
        """
        with self._lock:
            count = len(self._records)
            self._records.clear()
        self._logger.info("History cleared", extra={"records_cleared": count})
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
