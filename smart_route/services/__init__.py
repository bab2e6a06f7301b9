"""Services layer - Application orchestration.

Available services:
- RouteFinderService: Edits the road network and finds routes
"""

from .route_finder import RouteFinderService

__all__ = ["RouteFinderService"]
