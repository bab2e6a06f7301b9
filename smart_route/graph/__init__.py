"""Graph core for the road network.

This subpackage holds the priority queue, the mutable graph store with
its built-in default network, and the Dijkstra path finder that runs on
top of it.
"""

from .dijkstra import find_path
from .priority_queue import PriorityQueue
from .store import GraphSnapshot, GraphStore

__all__ = ["GraphStore", "GraphSnapshot", "PriorityQueue", "find_path"]
