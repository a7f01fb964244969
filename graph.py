"""
Directed, weighted graph abstraction.

Nodes are identified by hashable data values.
Edges are directed: u -> v with a non-negative float weight.
"""

from abc import ABC, abstractmethod
from typing import Hashable, Iterable, Sequence

from nodes import Edge


class Graph(ABC):
    """Read-only view of a directed, weighted graph, as consumed by engines."""

    @abstractmethod
    def nodes(self) -> Iterable[Hashable]:
        """Return all node values in the graph."""
        raise NotImplementedError

    @abstractmethod
    def contains_node(self, value: Hashable) -> bool:
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, value: Hashable) -> Sequence[Edge]:
        """
        Outgoing edges of the node holding value, in insertion order.

        Returns an empty sequence for values that are not nodes.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def version(self) -> int:
        """
        Counter bumped on every mutation.

        Engines compare it to decide whether cached search state is stale.
        """
        raise NotImplementedError

    def __contains__(self, value: object) -> bool:
        return self.contains_node(value)  # type: ignore[arg-type]
