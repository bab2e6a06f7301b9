import math
import threading
from itertools import permutations

import pytest

from smart_route.graph.dijkstra import find_path
from smart_route.graph.priority_queue import PriorityQueue
from smart_route.graph.store import GraphStore


def build_store(edges, directed=True, nodes=()):
    store = GraphStore.empty(directed=directed)
    names = list(nodes)
    for source, target, _ in edges:
        names.extend([source, target])
    for name in dict.fromkeys(names):
        store.add_node(name)
    for source, target, weight in edges:
        store.add_edge(source, target, weight)
    return store


def path_weight(store, path):
    return sum(store.neighbors(u)[v] for u, v in zip(path, path[1:]))


def brute_force_best(store, start, end):
    """Cheapest simple path by enumeration, for small graphs only."""
    others = [n for n in store.node_ids() if n not in (start, end)]
    best = math.inf
    for size in range(len(others) + 1):
        for middle in permutations(others, size):
            path = [start, *middle, end]
            if all(v in store.neighbors(u) for u, v in zip(path, path[1:])):
                best = min(best, path_weight(store, path))
    return best


# Priority queue


def test_priority_queue_pops_in_ascending_priority():
    queue = PriorityQueue()
    for item, priority in [("c", 3.0), ("a", 1.0), ("d", 4.0), ("b", 2.0)]:
        queue.push(item, priority)

    popped = [queue.pop() for _ in range(4)]

    assert popped == [("a", 1.0), ("b", 2.0), ("c", 3.0), ("d", 4.0)]


def test_priority_queue_empty_pop_returns_none():
    queue = PriorityQueue()
    assert queue.pop() is None
    assert queue.peek() is None
    assert not queue


def test_priority_queue_tolerates_duplicate_items():
    queue = PriorityQueue()
    queue.push("x", 5.0)
    queue.push("x", 2.0)
    queue.push("y", 3.0)

    assert len(queue) == 3
    assert queue.peek() == ("x", 2.0)
    assert queue.pop() == ("x", 2.0)
    assert queue.pop() == ("y", 3.0)
    assert queue.pop() == ("x", 5.0)
    assert queue.pop() is None


def test_priority_queue_accepts_uncomparable_items():
    queue = PriorityQueue()
    first, second = object(), object()
    queue.push(first, 1.0)
    queue.push(second, 1.0)

    items = {queue.pop()[0], queue.pop()[0]}
    assert items == {first, second}


def test_priority_queue_clear():
    queue = PriorityQueue()
    queue.push("a", 1.0)
    queue.clear()
    assert len(queue) == 0


# Dijkstra


def test_find_path_direct_edge():
    store = build_store([("A", "B", 10.0)])

    route = find_path(store, "A", "B")

    assert route.path == ("A", "B")
    assert route.total == 10.0


def test_find_path_chooses_shortest_path():
    # A can reach C directly, but A->B->C is shorter
    store = build_store([("A", "B", 3.0), ("A", "C", 10.0), ("B", "C", 4.0)])

    route = find_path(store, "A", "C")

    assert route.path == ("A", "B", "C")
    assert route.total == 7.0


def test_find_path_no_path_returns_inf():
    store = build_store([], nodes=["A", "B"])

    route = find_path(store, "A", "B")

    assert route.path == ()
    assert math.isinf(route.total)
    assert route.is_empty


def test_find_path_unknown_endpoint_is_unreachable():
    store = build_store([("A", "B", 1.0)])

    assert find_path(store, "A", "Z").is_empty
    assert find_path(store, "Z", "A").is_empty
    assert find_path(store, "Z", "Z").is_empty


def test_find_path_same_start_and_end():
    store = GraphStore()

    route = find_path(store, "C", "C")

    assert route.path == ("C",)
    assert route.total == 0


def test_find_path_skips_stale_queue_entries():
    # B is pushed twice (5 via A, then 2 via C); the stale entry is ignored
    store = build_store(
        [("A", "B", 5.0), ("A", "C", 1.0), ("C", "B", 1.0), ("B", "D", 1.0)]
    )

    route = find_path(store, "A", "D")

    assert route.path == ("A", "C", "B", "D")
    assert route.total == 3.0


def test_find_path_on_snapshot():
    store = GraphStore()
    snapshot = store.snapshot()
    store.remove_node("C")

    assert find_path(snapshot, "A", "D").path == ("A", "C", "D")
    assert find_path(store, "A", "D").path == ("A", "B", "E", "D")


def test_find_path_does_not_mutate_store():
    store = GraphStore()
    before = store.edges()

    find_path(store, "A", "E")

    assert store.edges() == before


# Default network scenarios


def test_default_network_a_to_d():
    route = find_path(GraphStore(), "A", "D")

    assert route.path == ("A", "C", "D")
    assert route.total == 3


def test_default_network_a_to_e_prefers_cheaper_longer_route():
    route = find_path(GraphStore(), "A", "E")

    assert route.path == ("A", "C", "D", "E")
    assert route.total == 4


@pytest.mark.parametrize("start,end", list(permutations("ABCDE", 2)))
def test_default_network_routes_are_optimal(start, end):
    store = GraphStore()

    route = find_path(store, start, end)

    assert route.path[0] == start
    assert route.path[-1] == end
    assert route.total == pytest.approx(path_weight(store, route.path))
    assert route.total == pytest.approx(brute_force_best(store, start, end))


def test_prefix_and_suffix_distances_add_up():
    store = GraphStore()
    route = find_path(store, "A", "E")

    for i, middle in enumerate(route.path):
        prefix = find_path(store, "A", middle)
        suffix = find_path(store, middle, "E")
        assert prefix.total + suffix.total == pytest.approx(route.total)
        assert prefix.total == pytest.approx(path_weight(store, route.path[: i + 1]))


def test_directed_edge_is_one_way():
    store = GraphStore()
    store.set_directed(True)
    store.add_edge("A", "D", 1)

    forward = find_path(store, "A", "D")

    assert forward.path == ("A", "D")
    assert forward.total == 1
    # D -> A still works through the default two-way roads
    assert find_path(store, "D", "A").total == 3


def test_directed_edge_between_isolated_nodes_is_unreachable_in_reverse():
    store = GraphStore.empty(directed=True)
    store.add_node("A")
    store.add_node("D")
    store.add_edge("A", "D", 1)

    assert find_path(store, "A", "D").as_dict() == {"path": ["A", "D"], "total": 1.0}
    assert math.isinf(find_path(store, "D", "A").total)


def test_route_result_hops():
    route = find_path(GraphStore(), "A", "E")
    assert route.hops == [("A", "C"), ("C", "D"), ("D", "E")]
    assert route.num_stops == 4


def test_find_path_terminates_with_negative_weight():
    # B -> A would lower A's distance after A is finalized
    store = build_store(
        [("S", "A", 1.0), ("A", "B", 1.0), ("B", "A", -5.0), ("B", "C", 1.0)]
    )
    results = []

    worker = threading.Thread(
        target=lambda: results.append(find_path(store, "S", "C")), daemon=True
    )
    worker.start()
    worker.join(timeout=5)

    assert not worker.is_alive(), "find_path did not return within 5s"
    assert results[0].path == ("S", "A", "B", "C")
    assert results[0].total == 3.0
