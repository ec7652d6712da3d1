"""
Tests for comparison metrics and winner selection.
"""

import math

import pytest

from pathfinder.metrics import (
    calculate_metrics,
    compare_results,
    format_cost,
    format_percent,
    format_time,
    overall_score,
)
from pathfinder.search import SearchResult


def make_result(strategy="bfs", found=True, path=("A", "B", "C"), cost=5, explored=6, time_ms=1.0):
    return SearchResult(
        found=found,
        path=path if found else (),
        path_cost=cost if found else 0,
        nodes_explored=explored,
        explored_order=tuple(f"n{i}" for i in range(explored)),
        time_taken_ms=time_ms,
        strategy=strategy,
        start="A",
        goal="C",
    )


class TestCalculateMetrics:
    def test_precision_recall_f1(self):
        metrics = calculate_metrics(make_result(explored=6), total_vertices=12)
        assert metrics.precision == pytest.approx(0.5)
        assert metrics.recall == pytest.approx(0.25)
        assert metrics.f1_score == pytest.approx(2 * 0.5 * 0.25 / 0.75)

    def test_not_found(self):
        metrics = calculate_metrics(make_result(found=False), total_vertices=12)
        assert metrics.found is False
        assert metrics.path_cost is None
        assert metrics.precision is None
        assert metrics.f1_score is None
        assert metrics.nodes_explored == 6

    def test_default_graph(self, engine):
        result = engine.run("bfs", "A", "Goal")
        metrics = calculate_metrics(result, total_vertices=8)
        assert metrics.precision == pytest.approx(4 / 8)
        assert metrics.recall == pytest.approx(4 / 8)
        assert metrics.f1_score == pytest.approx(0.5)


class TestOverallScore:
    def test_weighted_sum(self):
        metrics = calculate_metrics(make_result(cost=10, explored=4, path=("A", "B"), time_ms=2.0), 4)
        # precision 0.5, recall 0.5, f1 0.5
        expected = 10 * 0.4 + 4 * 0.3 + 2.0 * 0.1 - 0.5 * 100 * 0.2
        assert overall_score(metrics) == pytest.approx(expected)

    def test_not_found_is_infinite(self):
        assert overall_score(calculate_metrics(make_result(found=False), 8)) == math.inf


class TestCompareResults:
    """Test winner selection and reasons."""

    def test_lower_score_wins(self):
        uninformed = make_result("bfs", cost=8, explored=8)
        informed = make_result("astar", cost=8, explored=3)
        comparison = compare_results(uninformed, informed, total_vertices=8)
        assert comparison.winner == "informed"
        assert comparison.winner_name == "astar"
        assert comparison.informed_score < comparison.uninformed_score

    def test_reasons(self):
        uninformed = make_result("bfs", cost=8, explored=8, time_ms=1.0)
        informed = make_result("astar", cost=8, explored=3, time_ms=0.5)
        reasons = compare_results(uninformed, informed, 8).reasons
        assert "Both algorithms found paths with equal cost" in reasons
        assert "Informed explored 5 fewer nodes" in reasons
        assert "Informed had better efficiency (higher F1-Score)" in reasons
        assert "Informed was faster by 0.50 ms" in reasons

    def test_cheaper_path_reason(self):
        uninformed = make_result("ucs", cost=8, explored=7)
        informed = make_result("greedy", cost=12, explored=7)
        reasons = compare_results(uninformed, informed, 8).reasons
        assert reasons[0] == "Uninformed found a cheaper path (cost difference: 4.0)"

    def test_identical_results_tie(self):
        comparison = compare_results(make_result("ucs"), make_result("astar"), 8)
        assert comparison.winner == "tie"
        assert comparison.winner_name is None

    def test_only_one_found(self):
        comparison = compare_results(make_result("bfs"), make_result("greedy", found=False), 8)
        assert comparison.winner == "uninformed"
        assert comparison.reasons == ["Only Uninformed found a path"]

    def test_neither_found(self):
        comparison = compare_results(make_result(found=False), make_result(found=False), 8)
        assert comparison.winner == "tie"
        assert comparison.reasons == ["Neither algorithm found a path"]


class TestFormatting:
    def test_format_percent(self):
        assert format_percent(0.5) == "50.00%"
        assert format_percent(None) == "N/A"

    def test_format_time(self):
        assert format_time(1.2345) == "1.23 ms"
        assert format_time(None) == "N/A"

    def test_format_cost(self):
        assert format_cost(8) == "8"
        assert format_cost(2.5) == "2.5"
        assert format_cost(None) == "N/A"
