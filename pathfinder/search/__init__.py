"""
Search module.

Provides the five search strategies and their shared pieces:
- BreadthFirstSearch, DepthFirstSearch, UniformCostSearch: Uninformed
- AStarSearch, GreedyBestFirstSearch: Informed (use vertex heuristics)
- PriorityQueue: Binary min-heap frontier
- SearchResult / build_result: Result record and path reconstruction
- SearchEngine: Runs strategies by selector and compares them

Usage:
    from pathfinder.graph import build_default_graph
    from pathfinder.search import SearchEngine

    engine = SearchEngine(build_default_graph())
    result = engine.run("astar", "A", "Goal")
    result.path  # ('A', 'B', 'E', 'Goal') or another cost-8 path
"""

from pathfinder.search.engine import SearchEngine
from pathfinder.search.priority_queue import PriorityQueue
from pathfinder.search.registry import (
    ALIASES,
    INFORMED,
    STRATEGIES,
    UNINFORMED,
    get_strategy,
)
from pathfinder.search.result import SearchResult, build_result, reconstruct_path
from pathfinder.search.strategies import (
    AStarSearch,
    BreadthFirstSearch,
    DepthFirstSearch,
    GreedyBestFirstSearch,
    SearchStrategy,
    UniformCostSearch,
)

__all__ = [
    "ALIASES",
    "INFORMED",
    "STRATEGIES",
    "UNINFORMED",
    "AStarSearch",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "GreedyBestFirstSearch",
    "PriorityQueue",
    "SearchEngine",
    "SearchResult",
    "SearchStrategy",
    "UniformCostSearch",
    "build_result",
    "get_strategy",
    "reconstruct_path",
]
