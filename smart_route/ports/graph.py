"""Graph ports - Abstractions for reading the road network and routing.

These protocols define the contracts between the shortest-path engine
and whatever holds the topology (the live store or a frozen snapshot).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RouteResult


class GraphView(Protocol):
    """Read-only view of a road network.

    Implementations:
    - graph/store.py (GraphStore) - live, mutable
    - graph/store.py (GraphSnapshot) - frozen copy for queries
    """

    def node_ids(self) -> Sequence[str]:
        """Return all intersection identifiers."""
        ...

    def neighbors(self, node_id: str) -> Mapping[str, float]:
        """Return outgoing segments of a node as ``neighbor -> weight``.

        Unknown nodes and nodes without segments both yield an empty
        mapping.
        """
        ...

    def __contains__(self, node_id: object) -> bool: ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py

    The solver computes minimum-weight paths through the road network.
    It never mutates the graph it is given.
    """

    def solve(self, graph: GraphView, start: str, end: str) -> RouteResult:
        """Find the minimum-weight path between two intersections.

        Args:
            graph: The road network to search.
            start: Departure intersection.
            end: Arrival intersection.

        Returns:
            RouteResult with the path and total weight, or the
            unreachable result when no path exists.
        """
        ...
