"""Authoritative in-memory road network.

``GraphStore`` owns the set of intersections and the weighted adjacency
mapping ``from -> (to -> weight)``. Every edit goes through it and is
visible to the next query; there is no buffering.

Invariants:
- every outer key of the adjacency mapping is a known node, and no
  inner mapping references a removed node;
- while ``directed`` is False, every segment added or removed through
  this API is mirrored onto the reverse pair.

Toggling ``directed`` only affects later edits; segments already stored
are left as they are.
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass, field
from numbers import Real
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from ..domain.errors import DuplicateNodeError, InvalidWeightError, UnknownNodeError
from ..domain.models import Edge
from .defaults import default_adjacency

Adjacency = Dict[str, Dict[str, float]]


def _check_weight(weight: object) -> float:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(f"Weight must be a number, got {weight!r}", weight=weight)
    value = float(weight)
    if not math.isfinite(value):
        raise InvalidWeightError(f"Weight must be finite, got {weight!r}", weight=weight)
    return value


@dataclass(frozen=True)
class GraphSnapshot:
    """Immutable copy of the road network taken at one point in time.

    Queries run against a snapshot so that a concurrent edit cannot
    change the topology under a running search.
    """

    adjacency: Mapping[str, Mapping[str, float]]
    directed: bool = False

    @classmethod
    def of(cls, adjacency: Adjacency, directed: bool = False) -> GraphSnapshot:
        frozen = {
            node: MappingProxyType(dict(targets)) for node, targets in adjacency.items()
        }
        return cls(adjacency=MappingProxyType(frozen), directed=directed)

    def node_ids(self) -> Tuple[str, ...]:
        return tuple(self.adjacency)

    def neighbors(self, node_id: str) -> Mapping[str, float]:
        return self.adjacency.get(node_id, MappingProxyType({}))

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.adjacency

    def __len__(self) -> int:
        return len(self.adjacency)


@dataclass
class GraphStore:
    """Mutable road network with undirected/directed edit semantics.

    A new store holds the built-in default network (see ``defaults``).

    Attributes:
        directed: When False, segment edits are mirrored in both directions

    Example:
        store = GraphStore()
        store.add_node("F")
        store.add_edge("E", "F", 2)
        store.neighbors("F")  # {"E": 2.0}
    """

    directed: bool = False

    _adjacency: Adjacency = field(default_factory=default_adjacency, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @classmethod
    def empty(cls, directed: bool = False) -> GraphStore:
        """Create a store with no intersections at all."""
        store = cls(directed=directed)
        store._adjacency = {}
        return store

    # Mutations

    def add_node(self, node_id: str) -> None:
        """Add an intersection with no road segments.

        Raises:
            DuplicateNodeError: If the identifier is already used.
        """
        with self._lock:
            if node_id in self._adjacency:
                raise DuplicateNodeError(
                    f"Node already exists: {node_id}", node_id=node_id
                )
            self._adjacency[node_id] = {}
        self._logger.info("Node added", extra={"node": node_id})

    def remove_node(self, node_id: str) -> None:
        """Remove an intersection and every segment touching it.

        Raises:
            UnknownNodeError: If the node is not in the network.
        """
        with self._lock:
            self._require(node_id)
            del self._adjacency[node_id]
            dropped = 0
            for targets in self._adjacency.values():
                if targets.pop(node_id, None) is not None:
                    dropped += 1
        self._logger.info(
            "Node removed", extra={"node": node_id, "incoming_dropped": dropped}
        )

    def add_edge(self, source: str, target: str, weight: float) -> None:
        """Set the weight of the segment ``source -> target``.

        An existing segment is overwritten. In undirected mode the
        reverse segment gets the same weight.

        Raises:
            UnknownNodeError: If either endpoint is not in the network.
            InvalidWeightError: If the weight is not a finite number.
        """
        value = _check_weight(weight)
        with self._lock:
            self._require(source)
            self._require(target)
            self._adjacency[source][target] = value
            if not self.directed:
                self._adjacency[target][source] = value
        self._logger.info(
            "Edge set",
            extra={
                "source": source,
                "target": target,
                "weight": value,
                "directed": self.directed,
            },
        )

    def remove_edge(self, source: str, target: str) -> None:
        """Remove the segment ``source -> target`` if it exists.

        Removing a missing segment is a no-op. In undirected mode the
        reverse segment is removed too.
        """
        with self._lock:
            removed = self._adjacency.get(source, {}).pop(target, None) is not None
            if not self.directed:
                mirrored = self._adjacency.get(target, {}).pop(source, None)
                removed = removed or mirrored is not None
        self._logger.debug(
            "Edge removed" if removed else "Edge removal was a no-op",
            extra={"source": source, "target": target, "directed": self.directed},
        )

    def set_directed(self, directed: bool) -> None:
        """Switch edit semantics for later mutations only."""
        with self._lock:
            self.directed = bool(directed)
        self._logger.info("Directed mode changed", extra={"directed": self.directed})

    def reset(self) -> None:
        """Restore the built-in default network, discarding all edits."""
        with self._lock:
            self._adjacency = default_adjacency()
        self._logger.info("Graph reset", extra={"nodes": len(self._adjacency)})

    # Queries

    def node_ids(self) -> List[str]:
        """Return all intersection identifiers in insertion order."""
        with self._lock:
            return list(self._adjacency)

    def neighbors(self, node_id: str) -> Dict[str, float]:
        """Return a copy of the outgoing segments of a node.

        Unknown nodes yield an empty mapping rather than an error.
        """
        with self._lock:
            return dict(self._adjacency.get(node_id, {}))

    def has_node(self, node_id: str) -> bool:
        with self._lock:
            return node_id in self._adjacency

    def edges(self) -> List[Edge]:
        """List every stored directed segment entry.

        In undirected mode a two-way road shows up once per direction.
        """
        with self._lock:
            return [
                Edge(source, target, weight)
                for source, targets in self._adjacency.items()
                for target, weight in targets.items()
            ]

    def snapshot(self) -> GraphSnapshot:
        """Take an immutable copy of the current network."""
        with self._lock:
            return GraphSnapshot.of(self._adjacency, directed=self.directed)

    def __contains__(self, node_id: object) -> bool:
        with self._lock:
            return node_id in self._adjacency

    def __len__(self) -> int:
        with self._lock:
            return len(self._adjacency)

    def _require(self, node_id: str) -> None:
        if node_id not in self._adjacency:
            raise UnknownNodeError(f"Unknown node: {node_id}", node_id=node_id)
