"""Dijkstra Route Solver adapter.

This adapter wraps ``graph.dijkstra.find_path`` and adds:
- Snapshot isolation (queries never see a half-applied edit)
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import RouteResult
from ...graph.dijkstra import find_path
from ...ports.graph import GraphView


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. "No path" is returned as
    the unreachable ``RouteResult``, never raised.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: GraphView, start: str, end: str) -> RouteResult:
        """Find the minimum-weight path between two intersections.

        Args:
            graph: The road network. Stores exposing ``snapshot()`` are
                copied first so the search runs on a stable topology.
            start: Departure intersection.
            end: Arrival intersection.

        Returns:
            RouteResult with path and total, or the unreachable result.
        """
        self._logger.debug("Solving route", extra={"start": start, "end": end})

        snapshot = getattr(graph, "snapshot", None)
        view: GraphView = snapshot() if callable(snapshot) else graph

        if start not in view or end not in view:
            self._logger.info(
                "Route endpoint not in graph",
                extra={"start": start, "end": end},
            )
            return RouteResult.unreachable()

        route = find_path(view, start, end)

        if route.is_empty:
            self._logger.info("No route found", extra={"start": start, "end": end})
        else:
            self._logger.info(
                "Route found",
                extra={
                    "start": start,
                    "end": end,
                    "stops": route.num_stops,
                    "total": route.total,
                },
            )
        return route
