"""
Search result record and path reconstruction shared by every strategy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathfinder.graph.store import Graph


@dataclass(frozen=True)
class SearchResult:
    """
    Complete, immutable record of one search run.

    Attributes:
        found: Whether the goal was reached
        path: Vertex names from start to goal (empty if not found)
        path_cost: Total edge cost of path (0 if not found)
        nodes_explored: Number of vertices popped as current
        explored_order: Vertices in the order they were visited
        time_taken_ms: Wall-clock duration of the search in milliseconds
        strategy: Selector of the strategy that produced this result
        start: Start vertex name
        goal: Goal vertex name
    """

    found: bool
    path: tuple[str, ...]
    path_cost: float
    nodes_explored: int
    explored_order: tuple[str, ...]
    time_taken_ms: float
    strategy: str = ""
    start: str = ""
    goal: str = ""

    @property
    def path_length(self) -> int:
        """Number of edges on the path (0 if not found)."""
        return max(len(self.path) - 1, 0)

    def to_dict(self) -> dict[str, Any]:
        """Plain record in the shape consumed by the UI and JSON output."""
        return {
            "strategy": self.strategy,
            "start": self.start,
            "goal": self.goal,
            "found": self.found,
            "path": list(self.path),
            "pathCost": self.path_cost,
            "nodesExplored": self.nodes_explored,
            "exploredOrder": list(self.explored_order),
            "timeTaken": self.time_taken_ms,
        }


def reconstruct_path(parent: dict[str, str | None], goal: str) -> list[str]:
    """Walk the predecessor map back from goal to the None sentinel of the start."""
    path: list[str] = []
    current: str | None = goal
    while current is not None:
        path.append(current)
        current = parent[current]
    path.reverse()
    return path


def build_result(
    graph: Graph,
    start: str,
    goal: str,
    parent: dict[str, str | None],
    explored_order: list[str],
    time_taken_ms: float,
    found: bool = True,
    cost_map: dict[str, float] | None = None,
    strategy: str = "",
) -> SearchResult:
    """
    Build a SearchResult from the state a strategy leaves behind.

    When a cost map is given the path cost is its value for goal; otherwise
    the cost is summed from the graph's edge costs along the path.
    """
    path: list[str] = []
    path_cost: float = 0

    if found and goal in parent:
        path = reconstruct_path(parent, goal)

        if cost_map is not None:
            path_cost = cost_map.get(goal, 0)
        else:
            for source, target in zip(path, path[1:]):
                cost = graph.edge_cost(source, target)
                if cost is not None:
                    path_cost += cost

    return SearchResult(
        found=found,
        path=tuple(path),
        path_cost=path_cost,
        nodes_explored=len(explored_order),
        explored_order=tuple(explored_order),
        time_taken_ms=time_taken_ms,
        strategy=strategy,
        start=start,
        goal=goal,
    )
