"""
Metrics module.

Provides comparison metrics for search results:
- SearchMetrics: Precision, recall and F1 adapted to pathfinding
- Comparison: Side-by-side outcome with a declared winner
- calculate_metrics / overall_score / compare_results
"""

from pathfinder.metrics.calculator import (
    Comparison,
    SearchMetrics,
    calculate_metrics,
    compare_results,
    format_cost,
    format_percent,
    format_time,
    overall_score,
)

__all__ = [
    "Comparison",
    "SearchMetrics",
    "calculate_metrics",
    "compare_results",
    "format_cost",
    "format_percent",
    "format_time",
    "overall_score",
]
