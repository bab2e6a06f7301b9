"""Built-in road network restored by ``GraphStore.reset``.

Five intersections joined by seven two-way road segments forming a small
connected mesh.
"""

from typing import Dict, Tuple

DEFAULT_NODES: Tuple[str, ...] = ("A", "B", "C", "D", "E")

DEFAULT_EDGES: Tuple[Tuple[str, str, float], ...] = (
    ("A", "B", 3.0),
    ("A", "C", 1.0),
    ("B", "C", 2.0),
    ("B", "E", 3.0),
    ("C", "D", 2.0),
    ("C", "E", 3.0),
    ("D", "E", 1.0),
)


def default_adjacency() -> Dict[str, Dict[str, float]]:
    """Build a fresh, symmetric adjacency mapping of the default network."""
    adjacency: Dict[str, Dict[str, float]] = {node: {} for node in DEFAULT_NODES}
    for source, target, weight in DEFAULT_EDGES:
        adjacency[source][target] = weight
        adjacency[target][source] = weight
    return adjacency
