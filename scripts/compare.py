#!/usr/bin/env python3
"""
Graph Search CLI - Compare search strategies on the demonstration graph.

Usage:
    python scripts/compare.py
    python scripts/compare.py --start A --goal Goal --uninformed ucs --informed greedy
    python scripts/compare.py --all
    python scripts/compare.py --all --json
    python scripts/compare.py --start C --goal E --euclidean 0.01

Strategies:
    bfs     - Breadth-First Search (fewest edges)
    dfs     - Depth-First Search (no optimality guarantee)
    ucs     - Uniform-Cost Search (optimal cost)
    astar   - A* Search (optimal cost with an admissible heuristic)
    greedy  - Greedy Best-First Search (heuristic only)
"""

from __future__ import annotations

import argparse
import json
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

from pathfinder.config import (  # noqa: E402 - must be after sys.path modification
    DEFAULT_GOAL,
    DEFAULT_INFORMED,
    DEFAULT_START,
    DEFAULT_UNINFORMED,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from pathfinder.exceptions import PathfinderError  # noqa: E402
from pathfinder.graph import build_default_graph, euclidean_heuristics  # noqa: E402
from pathfinder.metrics import (  # noqa: E402
    calculate_metrics,
    format_cost,
    format_percent,
    format_time,
)
from pathfinder.search import STRATEGIES, SearchEngine, SearchResult  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare graph search strategies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--start",
        type=str,
        default=DEFAULT_START,
        help=f"Start vertex (default: {DEFAULT_START})",
    )
    parser.add_argument(
        "--goal",
        type=str,
        default=DEFAULT_GOAL,
        help=f"Goal vertex (default: {DEFAULT_GOAL})",
    )
    parser.add_argument(
        "--uninformed",
        type=str,
        default=DEFAULT_UNINFORMED,
        help=f"Uninformed strategy for the comparison (default: {DEFAULT_UNINFORMED})",
    )
    parser.add_argument(
        "--informed",
        type=str,
        default=DEFAULT_INFORMED,
        help=f"Informed strategy for the comparison (default: {DEFAULT_INFORMED})",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Run all five strategies instead of a pairwise comparison",
    )
    parser.add_argument(
        "--euclidean",
        type=float,
        default=None,
        metavar="SCALE",
        help="Replace heuristics with straight-line distance to the goal times SCALE",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def print_result(result: SearchResult, total_vertices: int) -> None:
    """Print one result with its metrics."""
    metrics = calculate_metrics(result, total_vertices)

    print(f"\n[{result.strategy}]")
    if result.found:
        print(f"  Path:      {' -> '.join(result.path)}")
    else:
        print(f"  Path:      none ('{result.goal}' unreachable)")
    print(f"  Cost:      {format_cost(metrics.path_cost)}")
    print(f"  Explored:  {result.nodes_explored} ({' -> '.join(result.explored_order)})")
    print(f"  Time:      {format_time(result.time_taken_ms)}")
    print(f"  Precision: {format_percent(metrics.precision)}")
    print(f"  Recall:    {format_percent(metrics.recall)}")
    print(f"  F1-Score:  {format_percent(metrics.f1_score)}")


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    graph = build_default_graph()
    engine = SearchEngine(graph)

    try:
        engine.validate_endpoints(args.start, args.goal)
        if args.euclidean is not None:
            graph = euclidean_heuristics(graph, args.goal, scale=args.euclidean)
            engine = SearchEngine(graph)

        if args.all:
            results = engine.run_all(args.start, args.goal)
            comparison = None
        else:
            comparison = engine.compare(args.uninformed, args.informed, args.start, args.goal)
            results = {
                comparison.uninformed.strategy: comparison.uninformed,
                comparison.informed.strategy: comparison.informed,
            }
    except (PathfinderError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.json:
        payload = {name: result.to_dict() for name, result in results.items()}
        if comparison is not None:
            payload["winner"] = comparison.winner_name
            payload["reasons"] = comparison.reasons
        print(json.dumps(payload, indent=2))
        return 0 if all(r.found for r in results.values()) else 1

    print("\n" + "=" * 60)
    print("Graph Search Comparison")
    print("=" * 60)
    print(f"  Start: {args.start}")
    print(f"  Goal:  {args.goal}")
    print(f"  Graph: {len(graph)} vertices, {graph.stats().edge_count} directed edges")
    print("=" * 60)

    for result in results.values():
        print_result(result, len(graph))

    if comparison is not None:
        print("\n" + "=" * 60)
        if comparison.winner_name is None:
            print("It's a Tie!")
        else:
            print(f"Winner: {comparison.winner_name} ({STRATEGIES[comparison.winner_name]().description})")
        print("=" * 60)
        for reason in comparison.reasons:
            print(f"  - {reason}")

    return 0 if all(r.found for r in results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
