"""
Exception hierarchy for the pathfinder package.

An unreachable goal is not an error: strategies report it as a
SearchResult with found=False.
"""

from __future__ import annotations


class PathfinderError(Exception):
    """Base class for all pathfinder errors."""


class UnknownStrategyError(PathfinderError, ValueError):
    """Raised when a strategy selector does not name one of the five strategies."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown strategy '{name}'. Available: {', '.join(available)}")


class VertexNotFoundError(PathfinderError, KeyError):
    """Raised when a vertex name is not present in the graph."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Vertex '{self.name}' does not exist"


class InvalidEdgeCostError(PathfinderError, ValueError):
    """Raised when an edge cost is below the minimum of 1."""


class EmptyQueueError(PathfinderError, IndexError):
    """Raised when extracting from an empty priority queue."""
