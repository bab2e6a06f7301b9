"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["DijkstraRouteSolver"]
