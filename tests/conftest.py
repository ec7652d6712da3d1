"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import random
from collections.abc import Callable
from pathlib import Path

import pytest

from pathfinder.graph import Graph, build_default_graph
from pathfinder.search import SearchEngine


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_graph() -> Graph:
    """Return the eight-vertex demonstration graph."""
    return build_default_graph()


@pytest.fixture
def engine(default_graph: Graph) -> SearchEngine:
    """Return an engine over the demonstration graph."""
    return SearchEngine(default_graph)


@pytest.fixture
def disconnected_graph() -> Graph:
    """
    Return a graph with two components.

    A -> B -> C is reachable from A; X <-> Y is not. C has no outgoing edges.
    """
    graph = Graph()
    for i, name in enumerate(["A", "B", "C", "X", "Y"]):
        graph.add_vertex(name, i * 50, 0, h=0)
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("X", "Y", 1, bidirectional=True)
    return graph


@pytest.fixture
def make_random_graph() -> Callable[..., Graph]:
    """
    Return a factory for small seeded random graphs.

    Vertices are named v0..v{n-1}, edge costs are integers in [1, max_cost]
    and all heuristics are 0.
    """

    def _make(seed: int, n: int = 6, density: float = 0.35, max_cost: int = 9) -> Graph:
        rng = random.Random(seed)
        graph = Graph()
        for i in range(n):
            graph.add_vertex(f"v{i}", rng.uniform(0, 500), rng.uniform(0, 400), h=0)
        for i in range(n):
            for j in range(n):
                if i != j and rng.random() < density:
                    graph.add_edge(f"v{i}", f"v{j}", rng.randint(1, max_cost))
        return graph

    return _make
