"""
Algorithm interfaces for shortest-path queries.

Keeps the search algorithm separate from graph storage.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Hashable, List, Tuple

from graph import Graph


@dataclass(frozen=True)
class ShortestPath:
    """
    Result of one shortest-path query.

    nodes runs from start to end inclusive; cost is the sum of the weights
    of the edges between consecutive nodes.
    """
    nodes: Tuple[Hashable, ...]
    cost: float

    @property
    def start(self) -> Hashable:
        return self.nodes[0]

    @property
    def end(self) -> Hashable:
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        return len(self.nodes) - 1


class DijkstraEngine(ABC):
    """
    Interface for shortest-path computation over non-negative weights.
    """

    @abstractmethod
    def shortest_path(self, graph: Graph, start: Hashable, end: Hashable) -> ShortestPath:
        """
        Compute the minimum-weight directed path from start to end.

        Raises:
            NoSuchNodeError: start or end is not a node of graph.
            UnreachableError: no directed path exists.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, start: Hashable) -> Dict[Hashable, float]:
        """
        Compute shortest-path costs from start to all reachable nodes.

        Returns:
            Mapping dest_value -> path_cost(start -> dest_value).
        """
        raise NotImplementedError

    def shortest_path_data(self, graph: Graph, start: Hashable, end: Hashable) -> List[Hashable]:
        """Node values along the shortest path, start and end included."""
        return list(self.shortest_path(graph, start, end).nodes)

    def shortest_path_cost(self, graph: Graph, start: Hashable, end: Hashable) -> float:
        """Total weight of the shortest path from start to end."""
        return self.shortest_path(graph, start, end).cost
