"""Adapters layer - Concrete implementations of the ports.

Available adapters:
- graph: DijkstraRouteSolver
- history: InMemoryRouteHistory
"""
