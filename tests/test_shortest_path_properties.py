"""
Randomized checks of shortest paths against brute-force enumeration.

Graphs are small enough that every simple path can be listed; with
non-negative weights some simple path is always a shortest path.
"""

import math
import random

import pytest

from config import EngineConfig
from dijkstra_graph import DijkstraGraph
from errors import NoSuchNodeError, UnreachableError

SEEDS = range(40)


def _random_graph(rng: random.Random, config=None) -> DijkstraGraph:
    g = DijkstraGraph(config=config)
    n = rng.randint(1, 6)
    for v in range(n):
        g.insert_node(v)
    for u in range(n):
        for v in range(n):
            if rng.random() < 0.35:
                g.insert_edge(u, v, rng.choice([0, 1, 2, 3, 5, 8, 0.5]))
    return g


def _brute_force_cost(g: DijkstraGraph, start, end) -> float:
    best = math.inf
    stack = [(start, 0.0, {start})]
    while stack:
        node, cost, seen = stack.pop()
        if node == end:
            best = min(best, cost)
            continue
        for edge in g.outgoing(node):
            nxt = edge.successor.data
            if nxt not in seen:
                stack.append((nxt, cost + edge.weight, seen | {nxt}))
    return best


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize(
    "config",
    [EngineConfig(), EngineConfig(stop_at_destination=False, cache_search_trees=True)],
    ids=["early-stop", "cached"],
)
def test_paths_match_brute_force(seed, config):
    rng = random.Random(seed)
    g = _random_graph(rng, config)

    for start in g.nodes():
        for end in g.nodes():
            expected = _brute_force_cost(g, start, end)

            if math.isinf(expected):
                with pytest.raises(UnreachableError):
                    g.shortest_path_data(start, end)
                with pytest.raises(UnreachableError):
                    g.shortest_path_cost(start, end)
                continue

            data = g.shortest_path_data(start, end)
            cost = g.shortest_path_cost(start, end)

            assert data[0] == start
            assert data[-1] == end
            walked = sum(g.get_edge_weight(u, v) for u, v in zip(data, data[1:]))
            assert walked == pytest.approx(cost)
            assert cost == pytest.approx(expected)


@pytest.mark.parametrize("seed", SEEDS)
def test_costs_map_matches_single_queries(seed):
    rng = random.Random(seed)
    g = _random_graph(rng)

    for start in g.nodes():
        costs = g.shortest_path_costs(start)
        assert costs[start] == 0.0
        for end in g.nodes():
            if end in costs:
                assert g.shortest_path_cost(start, end) == pytest.approx(costs[end])
            else:
                with pytest.raises(UnreachableError):
                    g.shortest_path_cost(start, end)


@pytest.mark.parametrize("seed", range(10))
def test_absent_values_always_rejected(seed):
    rng = random.Random(seed)
    g = _random_graph(rng)
    missing = "absent"

    for v in g.nodes():
        with pytest.raises(NoSuchNodeError):
            g.shortest_path_data(v, missing)
        with pytest.raises(NoSuchNodeError):
            g.shortest_path_cost(missing, v)
