"""
Exception types for the graph store and shortest-path engine.

Each error also derives from the builtin that matches its meaning, so callers
catching LookupError / ValueError / KeyError keep working.
"""

from typing import Hashable


class GraphError(Exception):
    """Base class for all graph and shortest-path failures."""


class UnknownNodeError(GraphError, LookupError):
    """An edge operation referenced a value that is not a node."""

    def __init__(self, value: Hashable) -> None:
        super().__init__(f"No node with value {value!r} in graph")
        self.value = value


class InvalidWeightError(GraphError, ValueError):
    """Edge weight is not a finite, non-negative number."""

    def __init__(self, weight: object) -> None:
        super().__init__(
            f"Edge weight must be a finite non-negative number, got {weight!r}"
        )
        self.weight = weight


class DuplicateEdgeError(GraphError, ValueError):
    """An edge between the same ordered pair already exists."""

    def __init__(self, source: Hashable, dest: Hashable) -> None:
        super().__init__(f"Edge {source!r} -> {dest!r} already exists")
        self.source = source
        self.dest = dest


class MissingEdgeError(GraphError, KeyError):
    """No edge between an ordered pair of existing nodes."""

    def __init__(self, source: Hashable, dest: Hashable) -> None:
        super().__init__(f"No edge {source!r} -> {dest!r}")
        self.source = source
        self.dest = dest

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class NoSuchNodeError(GraphError, LookupError):
    """A query referenced a start or end value absent from the graph."""

    def __init__(self, value: Hashable, role: str) -> None:
        super().__init__(f"{role.capitalize()} value {value!r} is not a node in the graph")
        self.value = value
        self.role = role


class UnreachableError(GraphError, LookupError):
    """No directed path leads from start to end."""

    def __init__(self, start: Hashable, end: Hashable) -> None:
        super().__init__(f"{end!r} is not reachable from {start!r}")
        self.start = start
        self.end = end
