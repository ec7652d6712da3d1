"""
Configuration constants for the graph search comparison project.

All paths, defaults, and tunable parameters are defined here.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of pathfinder/
PROJECT_ROOT = Path(__file__).parent.parent

# Benchmark output (JSON summaries written by scripts/benchmark.py)
RESULTS_DIR = PROJECT_ROOT / "results"

# =============================================================================
# Graph Configuration
# =============================================================================

# Edges cheaper than this are rejected by Graph.add_edge
MIN_EDGE_COST = 1

# Default cost when add_edge is called without one
DEFAULT_EDGE_COST = 1

# =============================================================================
# Search Configuration
# =============================================================================

# Endpoints used by the CLI and UI when none are given
DEFAULT_START = "A"
DEFAULT_GOAL = "Goal"

# Strategies pre-selected for a side-by-side comparison
DEFAULT_UNINFORMED = "bfs"
DEFAULT_INFORMED = "astar"

# =============================================================================
# Metrics Configuration
# =============================================================================

# Overall score (lower is better):
# score = COST * path_cost + EXPLORED * nodes_explored + TIME * time_ms - F1 * (100 * f1)
SCORE_COST_WEIGHT = 0.4
SCORE_EXPLORED_WEIGHT = 0.3
SCORE_TIME_WEIGHT = 0.1
SCORE_F1_WEIGHT = 0.2

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Number of timed runs per strategy
BENCHMARK_REPEATS = int(os.environ.get("BENCHMARK_REPEATS", "200"))

# =============================================================================
# Visualization Configuration
# =============================================================================

GRAPH_NODE_SIZE = 28
GRAPH_EDGE_WIDTH = 1

# Colors shared by the UI charts
COLOR_UNVISITED = "#bdc3c7"
COLOR_EXPLORED = "#3498db"
COLOR_PATH = "#2ecc71"
COLOR_START = "#f1c40f"
COLOR_GOAL = "#e74c3c"

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
