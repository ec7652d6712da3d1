"""
Graph module.

Provides the weighted directed graph the search strategies run on:
- Graph: Vertex/edge store with the neighbor query contract
- build_default_graph: Eight-vertex demonstration graph
- euclidean_heuristics: Straight-line heuristics from vertex coordinates
"""

from pathfinder.graph.defaults import build_default_graph, euclidean_heuristics
from pathfinder.graph.store import Edge, Graph, GraphStats, Neighbor, Vertex

__all__ = [
    "Edge",
    "Graph",
    "GraphStats",
    "Neighbor",
    "Vertex",
    "build_default_graph",
    "euclidean_heuristics",
]
