"""Immutable domain models for the Smart City Route Finder.

All models are frozen dataclasses with slots. They carry plain data
between the core and its collaborators (UI, history table) and have no
dependency on the graph store itself.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed road segment entry as stored in the adjacency mapping.

    Attributes:
        source: Intersection the segment leaves from
        target: Intersection the segment arrives at
        weight: Traffic-adjusted cost of traversing the segment
    """

    source: str
    target: str
    weight: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    An empty ``path`` with an infinite ``total`` means that ``end`` cannot
    be reached from ``start``.

    Attributes:
        path: Intersections from start to end, both inclusive
        total: Sum of the segment weights along the path
    """

    path: tuple[str, ...] = field(default_factory=tuple)
    total: float = math.inf

    @classmethod
    def unreachable(cls) -> RouteResult:
        """Return the designated "no path" result."""
        return cls(path=(), total=math.inf)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Number of intersections on the route."""
        return len(self.path)

    @property
    def hops(self) -> List[Tuple[str, str]]:
        """Consecutive ``(from, to)`` pairs along the route."""
        return list(zip(self.path, self.path[1:]))

    def as_dict(self) -> Dict[str, Any]:
        """Plain ``{"path": [...], "total": ...}`` form for collaborators."""
        return {"path": list(self.path), "total": self.total}


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """One entry of the route history log.

    Attributes:
        start: Departure intersection
        end: Arrival intersection
        total: Total weight of the route found
        time: When the route was computed (UTC)
    """

    start: str
    end: str
    total: float
    time: datetime


@dataclass(frozen=True, slots=True)
class RouteTrend:
    """Aggregated history for one ``start → end`` pair."""

    start: str
    end: str
    average: float
    samples: int

    @property
    def label(self) -> str:
        return f"{self.start}→{self.end}"
