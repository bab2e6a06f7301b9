"""Command-line demo for the Smart City Route Finder.

Runs a few queries against the default road network, edits it, and
prints the routes plus the resulting history trends. The embedding UI
does the same through ``RouteFinderService``.

Usage:
    python -m smart_route.pipeline
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import AppConfig, get_config
from .container import Container
from .domain.models import RouteResult
from .services import RouteFinderService


def format_route(route: RouteResult) -> str:
    """Render a route as a one-line status message."""
    if route.is_empty:
        return "No path found."
    total = f"{route.total:g}"
    return f"Route: {' → '.join(route.path)} | Total: {total}"


def configure_logging(config: Optional[AppConfig] = None) -> None:
    config = config or get_config()
    logging.basicConfig(
        level=config.observability.level.upper(),
        format=config.observability.format,
    )


def run_pipeline() -> None:
    """Run the demo scenario end to end."""
    configure_logging()
    service: RouteFinderService = Container.create_default().resolve(
        RouteFinderService
    )

    print("Nodes:", ", ".join(service.node_ids()))
    for start, end in (("A", "D"), ("A", "E")):
        print(f"{start} -> {end}:", format_route(service.find_route(start, end)))

    service.set_directed(True)
    service.add_node("F")
    service.add_edge("E", "F", 2)
    print("A -> F:", format_route(service.find_route("A", "F")))
    print("F -> A:", format_route(service.find_route("F", "A")))

    print("Trends:")
    for trend in service.trends():
        print(f"  {trend.label}: avg {trend.average} over {trend.samples} sample(s)")


if __name__ == "__main__":
    run_pipeline()
