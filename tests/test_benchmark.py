"""
Tests for the repeated-run benchmark.
"""

import json

import pytest

from pathfinder.benchmark import benchmark, save_summaries


class TestBenchmark:
    def test_summary_per_strategy(self, default_graph):
        summaries = benchmark(default_graph, "A", "Goal", repeats=5)
        assert [s.strategy for s in summaries] == ["bfs", "dfs", "ucs", "astar", "greedy"]
        assert all(s.runs == 5 for s in summaries)
        assert all(s.found for s in summaries)

    def test_costs(self, default_graph):
        summaries = {s.strategy: s for s in benchmark(default_graph, "A", "Goal", repeats=3)}
        assert summaries["ucs"].path_cost == 8
        assert summaries["astar"].path_cost == 8
        assert summaries["dfs"].path_cost == 11
        assert summaries["greedy"].path_cost == 12

    def test_uninformed_orders_stable(self, default_graph):
        summaries = benchmark(default_graph, "A", "Goal", strategies=["bfs", "dfs"], repeats=10)
        assert all(s.stable_order for s in summaries)

    def test_timing_statistics(self, default_graph):
        (summary,) = benchmark(default_graph, "A", "Goal", strategies=["astar"], repeats=20)
        assert summary.min_ms <= summary.median_ms
        assert summary.min_ms <= summary.mean_ms
        assert summary.std_ms >= 0

    def test_unreachable(self, disconnected_graph):
        (summary,) = benchmark(disconnected_graph, "A", "Y", strategies=["ucs"], repeats=2)
        assert summary.found is False
        assert summary.path_cost == 0

    def test_invalid_repeats(self, default_graph):
        with pytest.raises(ValueError):
            benchmark(default_graph, "A", "Goal", repeats=0)

    def test_save_summaries(self, default_graph, tmp_path):
        summaries = benchmark(default_graph, "A", "Goal", strategies=["bfs"], repeats=2)
        path = tmp_path / "out" / "benchmark.json"
        save_summaries(summaries, path)
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0]["strategy"] == "bfs"
        assert data[0]["runs"] == 2
