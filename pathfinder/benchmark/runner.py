"""
Repeated-run timing for the search strategies.

A single search on a small graph finishes in microseconds, so one timing
is mostly noise. The runner repeats each strategy and aggregates the
durations with numpy.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from pathfinder.config import BENCHMARK_REPEATS
from pathfinder.search.registry import STRATEGIES, get_strategy

if TYPE_CHECKING:
    from pathfinder.graph.store import Graph

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkSummary:
    """
    Aggregated timing for one strategy.

    Attributes:
        strategy: Strategy selector
        runs: Number of timed runs
        found: Whether the goal was reached (identical on every run)
        path_cost: Path cost (identical on every run)
        nodes_explored: Explored count of the first run
        stable_order: Whether every run produced the same explored order
        mean_ms: Mean duration in milliseconds
        std_ms: Standard deviation of the duration
        min_ms: Fastest run
        median_ms: Median run
    """

    strategy: str
    runs: int
    found: bool
    path_cost: float
    nodes_explored: int
    stable_order: bool
    mean_ms: float
    std_ms: float
    min_ms: float
    median_ms: float


def benchmark(
    graph: Graph,
    start: str,
    goal: str,
    strategies: list[str] | None = None,
    repeats: int = BENCHMARK_REPEATS,
) -> list[BenchmarkSummary]:
    """
    Time each strategy over repeated runs.

    Args:
        graph: Graph to search
        start: Start vertex name
        goal: Goal vertex name
        strategies: Selectors to run (all five by default)
        repeats: Timed runs per strategy

    Returns:
        One BenchmarkSummary per strategy, in the order requested

    Raises:
        ValueError: If repeats is less than 1
        RuntimeError: If found-status or path cost changes between runs
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")

    summaries = []
    for name in strategies or list(STRATEGIES):
        strategy = get_strategy(name)
        results = [strategy.search(graph, start, goal) for _ in range(repeats)]
        first = results[0]

        for result in results[1:]:
            if result.found != first.found or result.path_cost != first.path_cost:
                raise RuntimeError(
                    f"{strategy.name}: unstable outcome between runs "
                    f"({first.found}/{first.path_cost} vs {result.found}/{result.path_cost})"
                )

        stable_order = all(r.explored_order == first.explored_order for r in results)
        if not stable_order:
            logger.warning(f"{strategy.name}: explored order varied between runs")

        times = np.array([r.time_taken_ms for r in results], dtype=np.float64)
        summaries.append(BenchmarkSummary(
            strategy=strategy.name,
            runs=repeats,
            found=first.found,
            path_cost=first.path_cost,
            nodes_explored=first.nodes_explored,
            stable_order=stable_order,
            mean_ms=float(np.mean(times)),
            std_ms=float(np.std(times)),
            min_ms=float(np.min(times)),
            median_ms=float(np.median(times)),
        ))
        logger.info(
            f"{strategy.name}: {repeats} runs, mean {summaries[-1].mean_ms:.4f} ms "
            f"(std {summaries[-1].std_ms:.4f})"
        )

    return summaries


def save_summaries(summaries: list[BenchmarkSummary], path: Path) -> None:
    """Write summaries as a JSON list."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([asdict(s) for s in summaries], f, indent=2)
    logger.info(f"Saved {len(summaries)} summaries to {path}")
