"""Route finder service - Main orchestrator.

This is the single entry point an embedding application (canvas UI,
form handlers, history table) talks to. It owns the graph store for the
session and forwards queries to the route solver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..domain.models import Edge, RouteRecord, RouteResult, RouteTrend
from ..graph.store import GraphStore
from ..ports.graph import RouteSolverPort
from ..ports.history import RouteHistoryPort


@dataclass
class RouteFinderService:
    """Main service for editing the road network and finding routes.

    Mutations raise the store's structural errors (``DuplicateNodeError``,
    ``UnknownNodeError``, ``InvalidWeightError``) unchanged. Queries never
    raise for "no path".

    Attributes:
        store: The road network owned by this session
        route_solver: Computes minimum-weight paths
        history: Log of successful routes
    """

    store: GraphStore
    route_solver: RouteSolverPort
    history: Optional[RouteHistoryPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # Editing

    def add_node(self, node_id: str) -> None:
        self.store.add_node(node_id)

    def remove_node(self, node_id: str) -> None:
        self.store.remove_node(node_id)

    def add_edge(self, source: str, target: str, weight: float) -> None:
        self.store.add_edge(source, target, weight)

    def remove_edge(self, source: str, target: str) -> None:
        self.store.remove_edge(source, target)

    def set_directed(self, directed: bool) -> None:
        self.store.set_directed(directed)

    def reset(self) -> None:
        self.store.reset()

    # Listing

    def node_ids(self) -> List[str]:
        """Return intersection identifiers sorted for display."""
        return sorted(self.store.node_ids())

    def neighbors(self, node_id: str) -> Dict[str, float]:
        return self.store.neighbors(node_id)

    def edges(self) -> List[Edge]:
        return self.store.edges()

    # Routing

    def find_route(self, start: str, end: str) -> RouteResult:
        """Find the minimum-weight route and log it in the history.

        Only routes that actually travel (two or more stops) are
        recorded.

        Args:
            start: Departure intersection.
            end: Arrival intersection.

        Returns:
            RouteResult with path and total, or the unreachable result.
        """
        route = self.route_solver.solve(self.store, start, end)

        if self.history is not None and route.num_stops >= 2:
            self.history.record(start, end, route.total)
            self._logger.debug(
                "Route added to history", extra={"start": start, "end": end}
            )

        return route

    def recent_routes(self, limit: Optional[int] = None) -> List[RouteRecord]:
        if self.history is None:
            return []
        return list(self.history.recent(limit))

    def trends(self) -> List[RouteTrend]:
        if self.history is None:
            return []
        return list(self.history.trends())

    def clear_history(self) -> int:
        if self.history is None:
            return 0
        return self.history.clear()
