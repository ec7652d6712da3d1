"""
Comparison metrics for search results.

Precision, recall and F1 are adapted to pathfinding:

    precision = path length / nodes explored     (how focused the search was)
    recall    = path length / total vertices     (how much of the graph the path covers)
    f1        = 2 * precision * recall / (precision + recall)

Path length here counts vertices on the path, not edges.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pathfinder.config import (
    SCORE_COST_WEIGHT,
    SCORE_EXPLORED_WEIGHT,
    SCORE_F1_WEIGHT,
    SCORE_TIME_WEIGHT,
)

if TYPE_CHECKING:
    from pathfinder.search.result import SearchResult


@dataclass(frozen=True)
class SearchMetrics:
    """
    Metrics derived from one SearchResult.

    Attributes:
        strategy: Strategy selector of the result
        found: Whether the goal was reached
        path_cost: Path cost, or None if not found
        nodes_explored: Vertices visited during the search
        time_taken_ms: Search duration in milliseconds
        precision: Path vertices / explored vertices (None if not found)
        recall: Path vertices / graph vertices (None if not found)
        f1_score: Harmonic mean of precision and recall (None if not found)
    """

    strategy: str
    found: bool
    path_cost: float | None
    nodes_explored: int
    time_taken_ms: float
    precision: float | None = None
    recall: float | None = None
    f1_score: float | None = None


@dataclass(frozen=True)
class Comparison:
    """
    Side-by-side outcome of an uninformed and an informed run.

    Attributes:
        uninformed: Result of the uninformed strategy
        informed: Result of the informed strategy
        uninformed_metrics: Metrics for the uninformed result
        informed_metrics: Metrics for the informed result
        uninformed_score: Overall score (lower is better)
        informed_score: Overall score (lower is better)
        winner: "uninformed", "informed" or "tie"
        reasons: Human-readable explanations of the differences
    """

    uninformed: SearchResult
    informed: SearchResult
    uninformed_metrics: SearchMetrics
    informed_metrics: SearchMetrics
    uninformed_score: float
    informed_score: float
    winner: str
    reasons: list[str] = field(default_factory=list)

    @property
    def winner_name(self) -> str | None:
        """Strategy selector of the winner, or None on a tie."""
        if self.winner == "uninformed":
            return self.uninformed.strategy
        if self.winner == "informed":
            return self.informed.strategy
        return None


def calculate_metrics(result: SearchResult, total_vertices: int) -> SearchMetrics:
    """Compute precision, recall and F1 for a result on a graph of total_vertices."""
    if not result.found or not result.path:
        return SearchMetrics(
            strategy=result.strategy,
            found=False,
            path_cost=None,
            nodes_explored=result.nodes_explored,
            time_taken_ms=result.time_taken_ms,
        )

    path_length = len(result.path)
    precision = path_length / result.nodes_explored
    recall = path_length / total_vertices if total_vertices else 0.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0

    return SearchMetrics(
        strategy=result.strategy,
        found=True,
        path_cost=result.path_cost,
        nodes_explored=result.nodes_explored,
        time_taken_ms=result.time_taken_ms,
        precision=precision,
        recall=recall,
        f1_score=f1,
    )


def overall_score(metrics: SearchMetrics) -> float:
    """
    Weighted score combining cost, exploration, time and F1.

    Lower is better; a search that did not find the goal scores infinity.
    """
    if not metrics.found:
        return math.inf

    return (
        metrics.path_cost * SCORE_COST_WEIGHT
        + metrics.nodes_explored * SCORE_EXPLORED_WEIGHT
        + metrics.time_taken_ms * SCORE_TIME_WEIGHT
        - metrics.f1_score * 100 * SCORE_F1_WEIGHT
    )


def _describe_differences(uninformed: SearchMetrics, informed: SearchMetrics) -> list[str]:
    if not uninformed.found and not informed.found:
        return ["Neither algorithm found a path"]
    if not uninformed.found or not informed.found:
        finder = "Uninformed" if uninformed.found else "Informed"
        return [f"Only {finder} found a path"]

    reasons = []

    if uninformed.path_cost != informed.path_cost:
        better = "Uninformed" if uninformed.path_cost < informed.path_cost else "Informed"
        diff = abs(uninformed.path_cost - informed.path_cost)
        reasons.append(f"{better} found a cheaper path (cost difference: {diff:.1f})")
    else:
        reasons.append("Both algorithms found paths with equal cost")

    if uninformed.nodes_explored != informed.nodes_explored:
        better = "Uninformed" if uninformed.nodes_explored < informed.nodes_explored else "Informed"
        diff = abs(uninformed.nodes_explored - informed.nodes_explored)
        reasons.append(f"{better} explored {diff} fewer nodes")

    if uninformed.f1_score != informed.f1_score:
        better = "Uninformed" if uninformed.f1_score > informed.f1_score else "Informed"
        reasons.append(f"{better} had better efficiency (higher F1-Score)")

    if uninformed.time_taken_ms != informed.time_taken_ms:
        better = "Uninformed" if uninformed.time_taken_ms < informed.time_taken_ms else "Informed"
        diff = abs(uninformed.time_taken_ms - informed.time_taken_ms)
        reasons.append(f"{better} was faster by {diff:.2f} ms")

    return reasons


def compare_results(
    uninformed: SearchResult,
    informed: SearchResult,
    total_vertices: int,
) -> Comparison:
    """Score two results and declare the one with the lower score the winner."""
    uninformed_metrics = calculate_metrics(uninformed, total_vertices)
    informed_metrics = calculate_metrics(informed, total_vertices)
    uninformed_score = overall_score(uninformed_metrics)
    informed_score = overall_score(informed_metrics)

    if uninformed_score < informed_score:
        winner = "uninformed"
    elif informed_score < uninformed_score:
        winner = "informed"
    else:
        winner = "tie"

    return Comparison(
        uninformed=uninformed,
        informed=informed,
        uninformed_metrics=uninformed_metrics,
        informed_metrics=informed_metrics,
        uninformed_score=uninformed_score,
        informed_score=informed_score,
        winner=winner,
        reasons=_describe_differences(uninformed_metrics, informed_metrics),
    )


# =============================================================================
# Display Helpers
# =============================================================================

def format_percent(value: float | None) -> str:
    """Format a 0-1 ratio as a percentage, 'N/A' for None."""
    if value is None:
        return "N/A"
    return f"{value * 100:.2f}%"


def format_time(ms: float | None) -> str:
    if ms is None:
        return "N/A"
    return f"{ms:.2f} ms"


def format_cost(cost: float | None) -> str:
    if cost is None:
        return "N/A"
    return f"{cost:g}"
