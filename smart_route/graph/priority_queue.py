"""Binary-heap min-priority queue.

Knows nothing about graphs. The same item may be pushed several times
with different priorities; stale entries are left in place and are for
the caller to skip.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-priority queue over ``(item, priority)`` pairs.

    Entries are stored as ``(priority, sequence, item)`` so that items
    themselves are never compared. Ties in priority pop in insertion
    order, but callers should not rely on it.

    Example:
        queue = PriorityQueue[str]()
        queue.push("B", 3.0)
        queue.push("C", 1.0)
        queue.pop()  # ("C", 1.0)
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[float, int, T]] = []
        self._counter: Iterator[int] = itertools.count()

    def push(self, item: T, priority: float) -> None:
        """Insert an entry in O(log n)."""
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> Optional[Tuple[T, float]]:
        """Remove and return the minimum-priority entry in O(log n).

        Returns:
            ``(item, priority)``, or None once the queue is exhausted.
        """
        if not self._heap:
            return None
        priority, _, item = heapq.heappop(self._heap)
        return item, priority

    def peek(self) -> Optional[Tuple[T, float]]:
        """Return the minimum-priority entry without removing it."""
        if not self._heap:
            return None
        priority, _, item = self._heap[0]
        return item, priority

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
