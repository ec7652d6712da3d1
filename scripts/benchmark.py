#!/usr/bin/env python3
"""
Timing benchmark for all five search strategies.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --repeats 1000 --start C --goal G
    python scripts/benchmark.py --save  # Write results/benchmark.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env")

logging.basicConfig(level=logging.WARNING)  # Quiet mode

from pathfinder.benchmark import benchmark, save_summaries  # noqa: E402
from pathfinder.config import (  # noqa: E402
    BENCHMARK_REPEATS,
    DEFAULT_GOAL,
    DEFAULT_START,
    RESULTS_DIR,
)
from pathfinder.exceptions import PathfinderError  # noqa: E402
from pathfinder.graph import build_default_graph  # noqa: E402
from pathfinder.search import SearchEngine  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark graph search strategies")
    parser.add_argument("--start", type=str, default=DEFAULT_START)
    parser.add_argument("--goal", type=str, default=DEFAULT_GOAL)
    parser.add_argument(
        "--repeats",
        type=int,
        default=BENCHMARK_REPEATS,
        help=f"Timed runs per strategy (default: {BENCHMARK_REPEATS})",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Save summaries to results/benchmark.json",
    )
    return parser.parse_args()


def run_benchmark() -> int:
    args = parse_args()
    graph = build_default_graph()

    try:
        SearchEngine(graph).validate_endpoints(args.start, args.goal)
        summaries = benchmark(graph, args.start, args.goal, repeats=args.repeats)
    except (PathfinderError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("=" * 70)
    print(f"Search Benchmark - {args.start} -> {args.goal} ({args.repeats} runs each)")
    print("=" * 70)
    print(f"  {'strategy':10} {'found':>6} {'cost':>6} {'explored':>9} {'mean ms':>10} {'std ms':>10} {'stable':>7}")
    print("-" * 70)

    for s in summaries:
        print(
            f"  {s.strategy:10} {str(s.found):>6} {s.path_cost:>6g} {s.nodes_explored:>9} "
            f"{s.mean_ms:>10.4f} {s.std_ms:>10.4f} {'yes' if s.stable_order else 'no':>7}"
        )

    if args.save:
        path = RESULTS_DIR / "benchmark.json"
        save_summaries(summaries, path)
        print(f"\nSaved to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(run_benchmark())
