"""
Benchmark module.

Provides repeated-run timing for the search strategies:
- benchmark: Runs strategies many times and aggregates durations
- BenchmarkSummary: Aggregated timing for one strategy
"""

from pathfinder.benchmark.runner import BenchmarkSummary, benchmark, save_summaries

__all__ = ["BenchmarkSummary", "benchmark", "save_summaries"]
