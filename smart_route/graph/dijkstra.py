"""Shortest-path computation using Dijkstra's algorithm.

Decrease-key is realised lazily: a node may sit in the queue several
times with different priorities, and only its first pop counts. Later,
stale pops are skipped through the ``visited`` set.

Weights are assumed non-negative; with negative weights the result is
undefined. The graph is only read, never modified.
"""

from __future__ import annotations

import math
from typing import Dict, List, Set

from ..domain.models import RouteResult
from ..ports.graph import GraphView
from .priority_queue import PriorityQueue


def find_path(graph: GraphView, start: str, end: str) -> RouteResult:
    """Compute the minimum-weight path between two intersections.

    Parameters
    ----------
    graph:
        Road network, either a ``GraphStore`` or a ``GraphSnapshot``.
    start:
        Identifier of the departure intersection.
    end:
        Identifier of the arrival intersection.

    Returns
    -------
    RouteResult
        The intersections from ``start`` to ``end`` (inclusive) and the
        total weight. If either endpoint is unknown or no path exists,
        returns ``RouteResult(path=(), total=inf)``.
    """
    if start not in graph or end not in graph:
        return RouteResult.unreachable()

    if start == end:
        return RouteResult(path=(start,), total=0.0)

    distances: Dict[str, float] = {start: 0.0}
    previous: Dict[str, str] = {}
    visited: Set[str] = set()

    queue: PriorityQueue[str] = PriorityQueue()
    queue.push(start, 0.0)

    while queue:
        entry = queue.pop()
        assert entry is not None
        u, _ = entry

        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for v, weight in graph.neighbors(u).items():
            # finalized nodes keep their predecessor, so links never cycle
            if v in visited:
                continue
            alt = distances[u] + weight
            if alt < distances.get(v, math.inf):
                distances[v] = alt
                previous[v] = u
                queue.push(v, alt)

    total = distances.get(end, math.inf)
    if math.isinf(total):
        return RouteResult.unreachable()

    path: List[str] = [end]
    while path[-1] != start:
        path.append(previous[path[-1]])

    path.reverse()
    return RouteResult(path=tuple(path), total=total)
