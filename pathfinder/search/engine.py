"""
Search engine: runs strategies by selector against one graph.

Each run is a synchronous computation over private state, so one engine
can serve any number of runs as long as nobody mutates the graph while a
search is in progress.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pathfinder.exceptions import VertexNotFoundError
from pathfinder.metrics.calculator import Comparison, compare_results
from pathfinder.search.registry import STRATEGIES, get_strategy
from pathfinder.search.strategies import SearchStrategy

if TYPE_CHECKING:
    from pathfinder.graph.store import Graph
    from pathfinder.search.result import SearchResult

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Runs the five search strategies over a read-only graph.

    The engine handles:
    - Resolving strategy selectors (unknown ones fail before any work)
    - Running a single strategy, all strategies, or a side-by-side pair
    - Logging a summary of every run
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @property
    def graph(self) -> Graph:
        return self._graph

    def validate_endpoints(self, start: str, goal: str) -> None:
        """
        Check that start and goal exist.

        run() does not call this; validating endpoints is the caller's job.

        Raises:
            VertexNotFoundError: If either vertex is missing
        """
        for name in (start, goal):
            if not self._graph.has_vertex(name):
                raise VertexNotFoundError(name)

    def run(self, strategy: str | SearchStrategy, start: str, goal: str) -> SearchResult:
        """
        Run one strategy from start to goal.

        Args:
            strategy: Selector (e.g., 'bfs', 'a-star') or a strategy instance
            start: Start vertex name
            goal: Goal vertex name

        Returns:
            SearchResult for the run

        Raises:
            UnknownStrategyError: If strategy is an unknown selector
        """
        if isinstance(strategy, str):
            strategy = get_strategy(strategy)

        logger.debug(f"Running {strategy.name}: '{start}' -> '{goal}'")
        result = strategy.search(self._graph, start, goal)

        if result.found:
            logger.info(
                f"{strategy.name}: found path (cost {result.path_cost}, "
                f"{result.nodes_explored} explored, {result.time_taken_ms:.3f} ms): "
                f"{' -> '.join(result.path)}"
            )
        else:
            logger.warning(
                f"{strategy.name}: no path from '{start}' to '{goal}' "
                f"({result.nodes_explored} explored)"
            )
        logger.debug(f"{strategy.name} explored order: {' -> '.join(result.explored_order)}")

        return result

    def run_all(
        self,
        start: str,
        goal: str,
        strategies: list[str] | None = None,
    ) -> dict[str, SearchResult]:
        """Run several strategies (all five by default), keyed by selector."""
        selected = [get_strategy(name) for name in (strategies or list(STRATEGIES))]
        return {strategy.name: self.run(strategy, start, goal) for strategy in selected}

    def compare(
        self,
        uninformed: str | SearchStrategy,
        informed: str | SearchStrategy,
        start: str,
        goal: str,
    ) -> Comparison:
        """
        Run two strategies on the same endpoints and declare a winner.

        Both selectors are resolved before either search runs.
        """
        if isinstance(uninformed, str):
            uninformed = get_strategy(uninformed)
        if isinstance(informed, str):
            informed = get_strategy(informed)

        first = self.run(uninformed, start, goal)
        second = self.run(informed, start, goal)

        comparison = compare_results(first, second, total_vertices=len(self._graph))
        logger.info(f"Comparison winner: {comparison.winner}")
        return comparison

    def __repr__(self) -> str:
        return f"SearchEngine(graph={self._graph!r})"
