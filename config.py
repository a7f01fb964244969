"""
Tuning options for the shortest-path engine.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """
    Options for SimpleDijkstraEngine.

    Attributes
    ----------
    stop_at_destination:
        Stop searching once the end node is settled instead of draining the
        frontier. Results are identical either way. Ignored while
        ``cache_search_trees`` is on, since cached trees must be complete.
    cache_search_trees:
        Keep the fully drained search tree per start node and reuse it for
        later queries from the same start until the graph changes.
    max_cached_trees:
        Upper bound on cached trees; least recently used trees are evicted.
    """

    stop_at_destination: bool = True
    cache_search_trees: bool = False
    max_cached_trees: int = 32

    def validate(self) -> None:
        """
        Raises
        ------
        ValueError
            If ``max_cached_trees`` is not a positive integer.
        """
        if isinstance(self.max_cached_trees, bool) or not isinstance(self.max_cached_trees, int):
            raise ValueError("max_cached_trees must be an integer.")
        if self.max_cached_trees < 1:
            raise ValueError(
                f"max_cached_trees must be at least 1, got {self.max_cached_trees}."
            )
