"""
The five search strategies.

Every strategy owns its frontier, visited set, predecessor map and explored
list for the duration of one search() call; nothing is shared between runs
except the read-only graph. The goal test runs when a vertex is popped and
marked visited, not when it is first discovered.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING

from pathfinder.search.priority_queue import PriorityQueue
from pathfinder.search.result import SearchResult, build_result

if TYPE_CHECKING:
    from pathfinder.graph.store import Graph


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000


class SearchStrategy(ABC):
    """
    Abstract base class for graph search strategies.

    Strategies differ in frontier discipline (FIFO, LIFO, priority) and in
    how they record predecessors and costs. All of them return a
    SearchResult with the same shape.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short selector (e.g., 'bfs', 'astar')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @property
    def informed(self) -> bool:
        """Whether the strategy uses vertex heuristics."""
        return False

    @abstractmethod
    def search(self, graph: Graph, start: str, goal: str) -> SearchResult:
        """
        Search from start toward goal.

        Args:
            graph: Graph to search (read-only)
            start: Start vertex name (must exist)
            goal: Goal vertex name (must exist)

        Returns:
            SearchResult; found=False with an empty path if goal is unreachable
        """
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class BreadthFirstSearch(SearchStrategy):
    """
    Level-by-level search with a FIFO queue.

    Vertices are marked visited when enqueued, so each is enqueued once.
    Finds the path with the fewest edges; the cost is summed afterwards.
    """

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-First Search (FIFO queue, fewest edges)"

    def search(self, graph: Graph, start: str, goal: str) -> SearchResult:
        start_time = time.perf_counter()
        queue = deque([start])
        visited = {start}
        parent: dict[str, str | None] = {start: None}
        explored_order: list[str] = []

        while queue:
            current = queue.popleft()
            explored_order.append(current)

            if current == goal:
                return build_result(
                    graph, start, goal, parent, explored_order,
                    _elapsed_ms(start_time), strategy=self.name,
                )

            for neighbor in graph.neighbors(current):
                neighbor_name = neighbor.vertex.name
                if neighbor_name not in visited:
                    visited.add(neighbor_name)
                    parent[neighbor_name] = current
                    queue.append(neighbor_name)

        return build_result(
            graph, start, goal, parent, explored_order,
            _elapsed_ms(start_time), found=False, strategy=self.name,
        )


class DepthFirstSearch(SearchStrategy):
    """
    Deep-first search with a LIFO stack.

    Vertices are marked visited when popped, so a vertex may sit on the
    stack more than once. Neighbors are pushed in reverse so they are
    explored in the graph's native order. The predecessor is recorded the
    first time a vertex is pushed.
    """

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        return "Depth-First Search (LIFO stack, no optimality guarantee)"

    def search(self, graph: Graph, start: str, goal: str) -> SearchResult:
        start_time = time.perf_counter()
        stack = [start]
        visited: set[str] = set()
        parent: dict[str, str | None] = {start: None}
        explored_order: list[str] = []

        while stack:
            current = stack.pop()
            if current in visited:
                continue

            visited.add(current)
            explored_order.append(current)

            if current == goal:
                return build_result(
                    graph, start, goal, parent, explored_order,
                    _elapsed_ms(start_time), strategy=self.name,
                )

            for neighbor in reversed(graph.neighbors(current)):
                neighbor_name = neighbor.vertex.name
                if neighbor_name not in visited:
                    if neighbor_name not in parent:
                        parent[neighbor_name] = current
                    stack.append(neighbor_name)

        return build_result(
            graph, start, goal, parent, explored_order,
            _elapsed_ms(start_time), found=False, strategy=self.name,
        )


class UniformCostSearch(SearchStrategy):
    """
    Dijkstra's algorithm: expand the cheapest accumulated cost g first.

    Optimal for non-negative edge costs. Relaxation only on a strictly
    lower cost; stale heap entries are skipped when popped.
    """

    @property
    def name(self) -> str:
        return "ucs"

    @property
    def description(self) -> str:
        return "Uniform-Cost Search (priority on path cost g)"

    def search(self, graph: Graph, start: str, goal: str) -> SearchResult:
        start_time = time.perf_counter()
        frontier: PriorityQueue[str] = PriorityQueue()
        visited: set[str] = set()
        parent: dict[str, str | None] = {start: None}
        cost: dict[str, float] = {start: 0}
        explored_order: list[str] = []

        frontier.insert(start, 0)

        while not frontier.is_empty():
            current = frontier.extract_min()
            if current in visited:
                continue

            visited.add(current)
            explored_order.append(current)

            if current == goal:
                return build_result(
                    graph, start, goal, parent, explored_order,
                    _elapsed_ms(start_time), cost_map=cost, strategy=self.name,
                )

            for neighbor in graph.neighbors(current):
                neighbor_name = neighbor.vertex.name
                new_cost = cost[current] + neighbor.cost
                if neighbor_name not in cost or new_cost < cost[neighbor_name]:
                    cost[neighbor_name] = new_cost
                    parent[neighbor_name] = current
                    frontier.insert(neighbor_name, new_cost)

        return build_result(
            graph, start, goal, parent, explored_order,
            _elapsed_ms(start_time), found=False, strategy=self.name,
        )


class AStarSearch(SearchStrategy):
    """
    A* search: priority f = g + h.

    Returns the optimal cost when every vertex's h is admissible. The
    heuristic is read from the graph and is not validated here.
    """

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "A* Search (priority on g + h)"

    @property
    def informed(self) -> bool:
        return True

    def search(self, graph: Graph, start: str, goal: str) -> SearchResult:
        start_time = time.perf_counter()
        frontier: PriorityQueue[str] = PriorityQueue()
        visited: set[str] = set()
        parent: dict[str, str | None] = {start: None}
        g_score: dict[str, float] = {start: 0}
        explored_order: list[str] = []

        frontier.insert(start, graph.vertex(start).h)

        while not frontier.is_empty():
            current = frontier.extract_min()
            if current in visited:
                continue

            visited.add(current)
            explored_order.append(current)

            if current == goal:
                return build_result(
                    graph, start, goal, parent, explored_order,
                    _elapsed_ms(start_time), cost_map=g_score, strategy=self.name,
                )

            for neighbor in graph.neighbors(current):
                neighbor_name = neighbor.vertex.name
                tentative_g = g_score[current] + neighbor.cost
                if neighbor_name not in g_score or tentative_g < g_score[neighbor_name]:
                    parent[neighbor_name] = current
                    g_score[neighbor_name] = tentative_g
                    frontier.insert(neighbor_name, tentative_g + neighbor.vertex.h)

        return build_result(
            graph, start, goal, parent, explored_order,
            _elapsed_ms(start_time), found=False, strategy=self.name,
        )


class GreedyBestFirstSearch(SearchStrategy):
    """
    Greedy best-first search: priority is the neighbor's h alone.

    Predecessor and cost are fixed the first time a vertex is discovered,
    so the reported cost is that of the first discovery path.
    """

    @property
    def name(self) -> str:
        return "greedy"

    @property
    def description(self) -> str:
        return "Greedy Best-First Search (priority on h only)"

    @property
    def informed(self) -> bool:
        return True

    def search(self, graph: Graph, start: str, goal: str) -> SearchResult:
        start_time = time.perf_counter()
        frontier: PriorityQueue[str] = PriorityQueue()
        visited: set[str] = set()
        parent: dict[str, str | None] = {start: None}
        cost: dict[str, float] = {start: 0}
        explored_order: list[str] = []

        frontier.insert(start, graph.vertex(start).h)

        while not frontier.is_empty():
            current = frontier.extract_min()
            if current in visited:
                continue

            visited.add(current)
            explored_order.append(current)

            if current == goal:
                return build_result(
                    graph, start, goal, parent, explored_order,
                    _elapsed_ms(start_time), cost_map=cost, strategy=self.name,
                )

            for neighbor in graph.neighbors(current):
                neighbor_name = neighbor.vertex.name
                if neighbor_name in visited:
                    continue
                if neighbor_name not in parent:
                    parent[neighbor_name] = current
                    cost[neighbor_name] = cost[current] + neighbor.cost
                frontier.insert(neighbor_name, neighbor.vertex.h)

        return build_result(
            graph, start, goal, parent, explored_order,
            _elapsed_ms(start_time), found=False, strategy=self.name,
        )
