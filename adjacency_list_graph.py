"""
Concrete directed, weighted graph store.

Implements the Graph interface with a value -> Node mapping, where each Node
keeps its outgoing edges as an ordered adjacency list.
"""

import logging
import math
from numbers import Real
from typing import Dict, Hashable, Iterable, Sequence

from errors import DuplicateEdgeError, InvalidWeightError, MissingEdgeError, UnknownNodeError
from graph import Graph
from nodes import Edge, Node

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a value -> Node mapping.

    At most one edge is kept per ordered (source, dest) pair; inserting a
    second one raises DuplicateEdgeError. Nodes and edges cannot be removed.
    """

    def __init__(self) -> None:
        self._nodes: Dict[Hashable, Node] = {}
        self._edge_count = 0
        self._version = 0

    # --- Mutation API --------------------------------------------------------

    def insert_node(self, value: Hashable) -> bool:
        """
        Add a node holding value.

        Returns False (and changes nothing) if the value is already a node.
        """
        if value in self._nodes:
            return False
        self._nodes[value] = Node(value)
        self._version += 1
        logger.debug("inserted node %r", value)
        return True

    def insert_edge(self, source: Hashable, dest: Hashable, weight: float) -> None:
        """
        Add a directed edge source -> dest carrying weight.

        Raises:
            UnknownNodeError: source or dest is not a node.
            InvalidWeightError: weight is negative, not finite, or not a number.
            DuplicateEdgeError: an edge source -> dest already exists.
        """
        src = self._require(source)
        dst = self._require(dest)
        value = _check_weight(weight)
        if src.edge_to(dst) is not None:
            raise DuplicateEdgeError(source, dest)

        src.add_edge(Edge(src, dst, value))
        self._edge_count += 1
        self._version += 1
        logger.debug("inserted edge %r -> %r (%s)", source, dest, weight)

    # --- Queries -------------------------------------------------------------

    def contains_node(self, value: Hashable) -> bool:
        return value in self._nodes

    def contains_edge(self, source: Hashable, dest: Hashable) -> bool:
        src = self._nodes.get(source)
        dst = self._nodes.get(dest)
        if src is None or dst is None:
            return False
        return src.edge_to(dst) is not None

    def get_edge_weight(self, source: Hashable, dest: Hashable) -> float:
        src = self._require(source)
        dst = self._require(dest)
        edge = src.edge_to(dst)
        if edge is None:
            raise MissingEdgeError(source, dest)
        return edge.weight

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return self._edge_count

    def is_empty(self) -> bool:
        return not self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Iterable[Hashable]:
        return self._nodes.keys()

    def outgoing(self, value: Hashable) -> Sequence[Edge]:
        node = self._nodes.get(value)
        if node is None:
            return ()
        return tuple(node.edges_leaving)  # callers cannot mutate the list

    @property
    def version(self) -> int:
        return self._version

    def _require(self, value: Hashable) -> Node:
        node = self._nodes.get(value)
        if node is None:
            raise UnknownNodeError(value)
        return node


def _check_weight(weight: object) -> float:
    # bool is a Real subclass but never a meaningful weight
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidWeightError(weight)
    try:
        value = float(weight)
    except OverflowError:
        raise InvalidWeightError(weight) from None
    if not math.isfinite(value) or value < 0:
        raise InvalidWeightError(weight)
    return value
