"""
Strategy registry: maps selectors to the five strategy classes.

The set of strategies is closed; selectors are resolved here and nowhere else.
"""

from __future__ import annotations

from pathfinder.exceptions import UnknownStrategyError
from pathfinder.search.strategies import (
    AStarSearch,
    BreadthFirstSearch,
    DepthFirstSearch,
    GreedyBestFirstSearch,
    SearchStrategy,
    UniformCostSearch,
)

STRATEGIES: dict[str, type[SearchStrategy]] = {
    "bfs": BreadthFirstSearch,
    "dfs": DepthFirstSearch,
    "ucs": UniformCostSearch,
    "astar": AStarSearch,
    "greedy": GreedyBestFirstSearch,
}

ALIASES: dict[str, str] = {
    "breadth-first": "bfs",
    "depth-first": "dfs",
    "uniform-cost": "ucs",
    "a-star": "astar",
    "a*": "astar",
    "greedy-best-first": "greedy",
}

UNINFORMED = ["bfs", "dfs", "ucs"]
INFORMED = ["astar", "greedy"]


def get_strategy(name: str) -> SearchStrategy:
    """
    Get a search strategy by selector.

    Args:
        name: Strategy selector (bfs, dfs, ucs, astar, greedy) or an alias
            such as 'breadth-first' or 'a-star'

    Returns:
        Instantiated strategy

    Raises:
        UnknownStrategyError: If name is not a known selector
    """
    key = name.strip().lower()
    key = ALIASES.get(key, key)

    if key not in STRATEGIES:
        raise UnknownStrategyError(name, list(STRATEGIES.keys()))

    return STRATEGIES[key]()
