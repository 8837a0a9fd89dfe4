"""Pathfinding, maximum flow and directed-graph algorithms for grids and
graphs described by successor functions."""

__version__ = "0.1.0"

__all__ = [
    "edmonds_karp",
    "fringe",
    "grid",
    "idastar",
    "iddfs",
    "strongly_connected_components",
    "topological_sort",
    "yen",
]