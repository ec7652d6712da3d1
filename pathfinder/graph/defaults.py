"""
Demonstration graph and heuristic helpers.

The default graph has eight vertices laid out on a 500x400 canvas with
hand-picked admissible heuristics toward "Goal".
"""

from __future__ import annotations

import numpy as np

from pathfinder.exceptions import VertexNotFoundError
from pathfinder.graph.store import Graph

# (name, x, y, h)
DEFAULT_VERTICES: list[tuple[str, float, float, float]] = [
    ("A", 100, 100, 7),
    ("B", 250, 80, 6),
    ("C", 150, 200, 5),
    ("D", 300, 200, 4),
    ("E", 400, 150, 2),
    ("F", 200, 300, 3),
    ("G", 350, 320, 1),
    ("Goal", 450, 280, 0),
]

# (source, target, cost), all added as bidirectional
DEFAULT_EDGES: list[tuple[str, str, float]] = [
    ("A", "B", 2),
    ("A", "C", 3),
    ("B", "D", 3),
    ("B", "E", 4),
    ("C", "D", 2),
    ("C", "F", 4),
    ("D", "E", 1),
    ("D", "G", 3),
    ("E", "Goal", 2),
    ("F", "G", 2),
    ("G", "Goal", 3),
]


def build_default_graph() -> Graph:
    """Build the eight-vertex demonstration graph."""
    graph = Graph()
    for name, x, y, h in DEFAULT_VERTICES:
        graph.add_vertex(name, x, y, h)
    for source, target, cost in DEFAULT_EDGES:
        graph.add_edge(source, target, cost, bidirectional=True)
    return graph


def euclidean_heuristics(graph: Graph, goal: str, scale: float = 1.0) -> Graph:
    """
    Copy of graph whose h values are straight-line distances to goal.

    Coordinates are presentation units, so the distances are only admissible
    when scale maps them below the true edge costs. The caller picks scale.

    Args:
        graph: Source graph (left unchanged)
        goal: Vertex the distances are measured to
        scale: Multiplier applied to every distance

    Raises:
        VertexNotFoundError: If goal is not in the graph
    """
    goal_vertex = graph.vertex(goal)
    if goal_vertex is None:
        raise VertexNotFoundError(goal)

    vertices = graph.vertices()
    coords = np.array([(v.x, v.y) for v in vertices], dtype=np.float64)
    target = np.array([goal_vertex.x, goal_vertex.y], dtype=np.float64)
    distances = np.linalg.norm(coords - target, axis=1) * scale

    return graph.with_heuristics(
        {v.name: float(d) for v, d in zip(vertices, distances, strict=True)}
    )
