"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq with lazy deletion: a node may sit in the frontier several
times, and every entry after the first one popped for it is discarded.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple
import heapq
import itertools
import logging
import weakref

from algorithms import DijkstraEngine, ShortestPath
from config import EngineConfig
from errors import NoSuchNodeError, UnreachableError
from graph import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchRecord:
    """
    One settled node in a search tree.

    predecessor is the arena index of the record this one was reached from,
    or None for the start record.
    """
    node: Hashable
    cost: float
    predecessor: Optional[int]


@dataclass
class SearchTree:
    """
    Shortest-path tree rooted at start, stored as an arena of records.

    settled maps node value -> index into records. A node is settled at most
    once, and the first time is the cheapest.
    """
    start: Hashable
    records: List[SearchRecord] = field(default_factory=list)
    settled: Dict[Hashable, int] = field(default_factory=dict)
    complete: bool = False

    def settle(self, node: Hashable, cost: float, predecessor: Optional[int]) -> int:
        index = len(self.records)
        self.records.append(SearchRecord(node, cost, predecessor))
        self.settled[node] = index
        return index

    def costs(self) -> Dict[Hashable, float]:
        return {node: self.records[i].cost for node, i in self.settled.items()}

    def path_to(self, end: Hashable) -> ShortestPath:
        """Walk predecessors back from end, then reverse into start -> end order."""
        index = self.settled.get(end)
        if index is None:
            raise UnreachableError(self.start, end)

        cost = self.records[index].cost
        reversed_nodes: List[Hashable] = []
        step: Optional[int] = index
        while step is not None:
            record = self.records[step]
            reversed_nodes.append(record.node)
            step = record.predecessor
        reversed_nodes.reverse()
        return ShortestPath(tuple(reversed_nodes), cost)


@dataclass
class _CachedTree:
    graph: "weakref.ReferenceType[Graph]"
    version: int
    tree: SearchTree


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap.

    Complexity:
        O(E log E) over the edges reachable from the source.

    After every search that actually runs, last_settled and
    last_edges_examined record how much of the graph it touched.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self.config.validate()
        self._cache: "OrderedDict[Tuple[int, Hashable], _CachedTree]" = OrderedDict()
        self.last_settled = 0
        self.last_edges_examined = 0

    def shortest_path(self, graph: Graph, start: Hashable, end: Hashable) -> ShortestPath:
        _require(graph, start, "start")
        _require(graph, end, "end")
        tree = self._tree(graph, start, end)
        return tree.path_to(end)

    def shortest_path_costs(self, graph: Graph, start: Hashable) -> Dict[Hashable, float]:
        _require(graph, start, "start")
        return self._tree(graph, start, None).costs()

    def clear_cache(self) -> None:
        self._cache.clear()

    def cached_trees(self) -> int:
        return len(self._cache)

    def _tree(self, graph: Graph, start: Hashable, end: Optional[Hashable]) -> SearchTree:
        if not self.config.cache_search_trees:
            stop_at = end if self.config.stop_at_destination else None
            return self._search(graph, start, stop_at)

        key = (id(graph), start)
        entry = self._cache.get(key)
        # id() can be reused once the cached graph is collected
        if entry is not None and entry.graph() is graph and entry.version == graph.version:
            self._cache.move_to_end(key)
            logger.debug("search tree cache hit for start %r", start)
            return entry.tree

        tree = self._search(graph, start, None)
        self._cache[key] = _CachedTree(weakref.ref(graph), graph.version, tree)
        self._cache.move_to_end(key)
        while len(self._cache) > self.config.max_cached_trees:
            (_, evicted), _ = self._cache.popitem(last=False)
            logger.debug("evicted cached search tree for start %r", evicted)
        return tree

    def _search(self, graph: Graph, start: Hashable, stop_at: Optional[Hashable]) -> SearchTree:
        """
        Grow the search tree from start.

        Frontier entries are (cost, seq, node, predecessor_index); seq breaks
        cost ties so node values never have to be comparable. With stop_at
        set, the search ends as soon as that node is settled.
        """
        tree = SearchTree(start)
        seq = itertools.count()
        pq: List[Tuple[float, int, Hashable, Optional[int]]] = [(0.0, next(seq), start, None)]
        examined = 0

        while pq:
            cost, _, node, predecessor = heapq.heappop(pq)

            # Skip outdated entries
            if node in tree.settled:
                continue

            index = tree.settle(node, cost, predecessor)
            if stop_at is not None and node == stop_at:
                break

            for edge in graph.outgoing(node):
                examined += 1
                successor = edge.successor.data
                if successor in tree.settled:
                    continue
                heapq.heappush(pq, (cost + edge.weight, next(seq), successor, index))
        else:
            tree.complete = True

        self.last_settled = len(tree.records)
        self.last_edges_examined = examined
        logger.debug(
            "dijkstra from %r settled %d nodes, examined %d edges%s",
            start,
            self.last_settled,
            examined,
            "" if tree.complete else f" (stopped at {stop_at!r})",
        )
        return tree


def _require(graph: Graph, value: Hashable, role: str) -> None:
    if not graph.contains_node(value):
        raise NoSuchNodeError(value, role)
