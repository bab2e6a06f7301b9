"""Top-level package for the Smart City Route Finder.

This package holds the in-memory road network (a small, mutable,
weighted graph of intersections and road segments) and the shortest-path
engine that finds the lowest-traffic route between two intersections.

Rendering, click-to-pick and animation are left to the embedding
application, which drives the core through ``RouteFinderService``.
"""

from .graph import GraphStore, PriorityQueue, find_path
from .services import RouteFinderService

__all__ = ["GraphStore", "PriorityQueue", "find_path", "RouteFinderService"]
