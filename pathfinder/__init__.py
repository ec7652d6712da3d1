"""
Graph Search Comparison.

Runs uninformed (BFS, DFS, UCS) and informed (A*, Greedy best-first)
search strategies over a weighted graph and compares the paths they find,
how much of the graph they explore, and how long they take.
"""

__version__ = "0.1.0"
