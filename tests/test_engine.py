"""
Tests for strategy selection and the search engine.
"""

import logging

import pytest

from pathfinder.exceptions import UnknownStrategyError, VertexNotFoundError
from pathfinder.search import (
    INFORMED,
    STRATEGIES,
    UNINFORMED,
    AStarSearch,
    BreadthFirstSearch,
    get_strategy,
)


class TestStrategySelection:
    """Test get_strategy and the registry."""

    @pytest.mark.parametrize("name", ["bfs", "dfs", "ucs", "astar", "greedy"])
    def test_selectors_round_trip(self, name):
        assert get_strategy(name).name == name

    @pytest.mark.parametrize(
        ("alias", "expected"),
        [
            ("breadth-first", "bfs"),
            ("depth-first", "dfs"),
            ("uniform-cost", "ucs"),
            ("a-star", "astar"),
            ("A*", "astar"),
            ("greedy-best-first", "greedy"),
            ("  BFS ", "bfs"),
        ],
    )
    def test_aliases(self, alias, expected):
        assert get_strategy(alias).name == expected

    def test_unknown_selector(self):
        """Should raise UnknownStrategyError (a ValueError) listing what exists."""
        with pytest.raises(UnknownStrategyError, match="Available: bfs, dfs, ucs, astar, greedy"):
            get_strategy("dijkstra-plus")
        with pytest.raises(ValueError):
            get_strategy("")

    def test_informed_split(self):
        assert sorted(UNINFORMED + INFORMED) == sorted(STRATEGIES)
        for name in UNINFORMED:
            assert get_strategy(name).informed is False
        for name in INFORMED:
            assert get_strategy(name).informed is True

    def test_fresh_instance_each_call(self):
        assert get_strategy("bfs") is not get_strategy("bfs")

    def test_repr(self):
        assert repr(AStarSearch()) == "AStarSearch(name='astar')"


class TestSearchEngine:
    """Test SearchEngine.run and friends."""

    def test_run_by_selector(self, engine):
        result = engine.run("ucs", "A", "Goal")
        assert result.found
        assert result.path_cost == 8
        assert result.strategy == "ucs"

    def test_run_by_instance(self, engine):
        result = engine.run(BreadthFirstSearch(), "A", "Goal")
        assert result.path == ("A", "B", "E", "Goal")

    def test_run_unknown_selector(self, engine):
        with pytest.raises(UnknownStrategyError):
            engine.run("bogus", "A", "Goal")

    def test_run_unreachable_is_not_an_error(self, disconnected_graph):
        from pathfinder.search import SearchEngine

        result = SearchEngine(disconnected_graph).run("astar", "A", "X")
        assert not result.found

    def test_run_logs_summary(self, engine, caplog):
        with caplog.at_level(logging.INFO, logger="pathfinder.search.engine"):
            engine.run("bfs", "A", "Goal")
        assert "bfs: found path (cost 8" in caplog.text

    def test_run_logs_warning_when_unreachable(self, disconnected_graph, caplog):
        from pathfinder.search import SearchEngine

        with caplog.at_level(logging.WARNING, logger="pathfinder.search.engine"):
            SearchEngine(disconnected_graph).run("dfs", "A", "Y")
        assert "no path from 'A' to 'Y'" in caplog.text

    def test_run_all(self, engine):
        results = engine.run_all("A", "Goal")
        assert list(results) == ["bfs", "dfs", "ucs", "astar", "greedy"]
        assert all(r.found for r in results.values())
        assert results["ucs"].path_cost == results["astar"].path_cost == 8

    def test_run_all_subset(self, engine):
        results = engine.run_all("A", "Goal", strategies=["greedy", "a-star"])
        assert list(results) == ["greedy", "astar"]

    def test_run_all_unknown_fails_before_running(self, engine, caplog):
        with caplog.at_level(logging.INFO), pytest.raises(UnknownStrategyError):
            engine.run_all("A", "Goal", strategies=["bfs", "nope"])
        assert "bfs: found path" not in caplog.text

    def test_validate_endpoints(self, engine):
        engine.validate_endpoints("A", "Goal")
        with pytest.raises(VertexNotFoundError, match="Vertex 'Nowhere' does not exist"):
            engine.validate_endpoints("A", "Nowhere")

    def test_compare(self, engine):
        comparison = engine.compare("bfs", "astar", "A", "Goal")
        assert comparison.uninformed.strategy == "bfs"
        assert comparison.informed.strategy == "astar"
        assert comparison.winner in ("uninformed", "informed", "tie")
        assert comparison.reasons

    def test_compare_unknown_runs_nothing(self, engine, caplog):
        with caplog.at_level(logging.INFO), pytest.raises(UnknownStrategyError):
            engine.compare("bfs", "bogus", "A", "Goal")
        assert "found path" not in caplog.text

    def test_independent_runs(self, engine):
        """Runs share nothing but the graph."""
        first = engine.run("dfs", "A", "Goal")
        engine.run("greedy", "C", "B")
        second = engine.run("dfs", "A", "Goal")
        assert first.explored_order == second.explored_order
