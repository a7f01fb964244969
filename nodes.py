"""
Node and edge records for the graph store.

A Node wraps one user-supplied, hashable data value and owns the ordered
list of its outgoing edges. Edges are directed: source -> successor.
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional


@dataclass(eq=False)
class Node:
    """
    Graph vertex identified by its data value.

    Identity is by object (the store guarantees one Node per value), so
    nodes stay hashable while their edge list grows. _by_successor indexes
    the same edges as edges_leaving for constant-time lookup.
    """

    data: Hashable
    edges_leaving: List["Edge"] = field(default_factory=list)
    _by_successor: Dict["Node", "Edge"] = field(default_factory=dict, repr=False)

    def add_edge(self, edge: "Edge") -> None:
        self.edges_leaving.append(edge)
        self._by_successor[edge.successor] = edge

    def edge_to(self, successor: "Node") -> Optional["Edge"]:
        return self._by_successor.get(successor)

    def __repr__(self) -> str:
        return f"Node({self.data!r}, out_degree={len(self.edges_leaving)})"


@dataclass(frozen=True, eq=False)
class Edge:
    """Directed, weighted edge owned by its source node."""

    source: Node
    successor: Node
    weight: float

    def __repr__(self) -> str:
        return f"Edge({self.source.data!r} -> {self.successor.data!r}, {self.weight})"
