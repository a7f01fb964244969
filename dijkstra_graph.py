"""
Graph store with shortest-path queries attached.
"""

from typing import Dict, Hashable, List, Optional

from adjacency_list_graph import AdjacencyListGraph
from algorithms import DijkstraEngine, ShortestPath
from config import EngineConfig
from dijkstra_engine import SimpleDijkstraEngine


class DijkstraGraph(AdjacencyListGraph):
    """
    AdjacencyListGraph that answers shortest-path queries about itself.

    Pass either a ready engine or an EngineConfig for the default
    SimpleDijkstraEngine, not both.
    """

    def __init__(
        self,
        engine: Optional[DijkstraEngine] = None,
        config: Optional[EngineConfig] = None,
    ) -> None:
        super().__init__()
        if engine is not None and config is not None:
            raise ValueError("Pass either engine or config, not both.")
        self.engine = engine or SimpleDijkstraEngine(config)

    def shortest_path(self, start: Hashable, end: Hashable) -> ShortestPath:
        return self.engine.shortest_path(self, start, end)

    def shortest_path_data(self, start: Hashable, end: Hashable) -> List[Hashable]:
        """
        Node values along the shortest path from start to end, both included.

        Raises NoSuchNodeError if either value is not a node, and
        UnreachableError if no directed path connects them.
        """
        return self.engine.shortest_path_data(self, start, end)

    def shortest_path_cost(self, start: Hashable, end: Hashable) -> float:
        """Sum of edge weights along the path shortest_path_data returns."""
        return self.engine.shortest_path_cost(self, start, end)

    def shortest_path_costs(self, start: Hashable) -> Dict[Hashable, float]:
        return self.engine.shortest_path_costs(self, start)
