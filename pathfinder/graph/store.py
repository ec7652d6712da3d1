"""
Graph store holding vertices and directed weighted edges.

The search strategies only read from the store through neighbors(),
vertex() and edge_cost(). Neighbor order is insertion order and is stable,
so BFS and DFS produce the same exploration sequence on every run.

Usage:
    from pathfinder.graph import Graph

    graph = Graph()
    graph.add_vertex("A", 100, 100, h=7)
    graph.add_vertex("B", 250, 80, h=6)
    graph.add_edge("A", "B", cost=2, bidirectional=True)
    graph.neighbors("A")  # [Neighbor(vertex=Vertex(name='B', ...), cost=2)]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterator

from pathfinder.config import DEFAULT_EDGE_COST, MIN_EDGE_COST
from pathfinder.exceptions import InvalidEdgeCostError, VertexNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vertex:
    """
    A named point in the graph.

    Attributes:
        name: Unique identifier within the graph
        x: Horizontal placement (presentation only)
        y: Vertical placement (presentation only)
        h: Heuristic estimate of the cost to the goal (A* and Greedy only)
    """

    name: str
    x: float
    y: float
    h: float = 0


@dataclass(frozen=True)
class Edge:
    """A directed edge from source to target with a positive cost."""

    source: str
    target: str
    cost: float


@dataclass(frozen=True)
class Neighbor:
    """One row of Graph.neighbors(): the vertex reached and the edge cost."""

    vertex: Vertex
    cost: float


@dataclass(frozen=True)
class GraphStats:
    vertex_count: int
    edge_count: int
    avg_degree: float


class Graph:
    """
    Directed weighted graph keyed by vertex name.

    Bidirectional connections are stored as two directed edges. Outgoing
    edges are kept in a dict per vertex so that updating a cost keeps the
    edge in its original position.
    """

    def __init__(self) -> None:
        self._vertices: dict[str, Vertex] = {}
        self._edges: dict[str, dict[str, float]] = {}

    # =========================================================================
    # Query Contract
    # =========================================================================

    def neighbors(self, name: str) -> list[Neighbor]:
        """Outgoing neighbors of a vertex in insertion order ([] if unknown)."""
        edges = self._edges.get(name)
        if not edges:
            return []
        return [Neighbor(self._vertices[target], cost) for target, cost in edges.items()]

    def vertex(self, name: str) -> Vertex | None:
        """Get a vertex by name, or None if absent."""
        return self._vertices.get(name)

    def edge_cost(self, source: str, target: str) -> float | None:
        """Cost of the edge source -> target, or None if there is no such edge."""
        return self._edges.get(source, {}).get(target)

    def has_vertex(self, name: str) -> bool:
        return name in self._vertices

    def vertices(self) -> list[Vertex]:
        """All vertices in insertion order."""
        return list(self._vertices.values())

    def edges(self) -> list[Edge]:
        """All directed edges, grouped by source in insertion order."""
        return [
            Edge(source, target, cost)
            for source, targets in self._edges.items()
            for target, cost in targets.items()
        ]

    def stats(self) -> GraphStats:
        """Vertex count, directed edge count and average out-degree."""
        edge_count = sum(len(targets) for targets in self._edges.values())
        vertex_count = len(self._vertices)
        return GraphStats(
            vertex_count=vertex_count,
            edge_count=edge_count,
            avg_degree=round(edge_count / vertex_count, 2) if vertex_count else 0.0,
        )

    def is_empty(self) -> bool:
        return not self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, name: object) -> bool:
        return name in self._vertices

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, name: str, x: float, y: float, h: float = 0) -> Vertex:
        """
        Add a vertex, replacing the record of an existing one.

        Replacing keeps the vertex's edges; only placement and heuristic change.
        """
        if name in self._vertices:
            logger.warning(f"Vertex '{name}' already exists. Updating...")

        vertex = Vertex(name=name, x=x, y=y, h=h)
        self._vertices[name] = vertex
        self._edges.setdefault(name, {})
        return vertex

    def add_edge(
        self,
        source: str,
        target: str,
        cost: float = DEFAULT_EDGE_COST,
        bidirectional: bool = False,
    ) -> None:
        """
        Add a directed edge (and its reverse if bidirectional).

        An existing edge keeps its position and gets the new cost.

        Raises:
            VertexNotFoundError: If either endpoint is missing
            InvalidEdgeCostError: If cost is below MIN_EDGE_COST
        """
        for name in (source, target):
            if name not in self._vertices:
                raise VertexNotFoundError(name)
        if cost < MIN_EDGE_COST:
            raise InvalidEdgeCostError(
                f"Edge {source} -> {target} has cost {cost}; minimum is {MIN_EDGE_COST}"
            )

        self._edges[source][target] = cost
        if bidirectional:
            self._edges[target][source] = cost

    def remove_vertex(self, name: str) -> bool:
        """Remove a vertex together with every edge touching it."""
        if name not in self._vertices:
            return False

        for targets in self._edges.values():
            targets.pop(name, None)
        del self._vertices[name]
        del self._edges[name]
        return True

    def clear(self) -> None:
        self._vertices.clear()
        self._edges.clear()

    # =========================================================================
    # Copies
    # =========================================================================

    def copy(self) -> Graph:
        """Shallow structural copy (vertices are immutable and shared)."""
        clone = Graph()
        clone._vertices = dict(self._vertices)
        clone._edges = {name: dict(targets) for name, targets in self._edges.items()}
        return clone

    def with_heuristics(self, heuristics: dict[str, float]) -> Graph:
        """Copy of the graph with h replaced for the vertices named in heuristics."""
        clone = self.copy()
        for name, h in heuristics.items():
            if name not in clone._vertices:
                raise VertexNotFoundError(name)
            clone._vertices[name] = replace(clone._vertices[name], h=float(h))
        return clone

    def __repr__(self) -> str:
        stats = self.stats()
        return f"Graph(vertices={stats.vertex_count}, edges={stats.edge_count})"
