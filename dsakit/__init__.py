"""Classic algorithm solutions: backtracking, greedy scheduling, shortest paths, topological sorting and binary trees."""

__version__ = "0.1.0"

__all__ = ["backtracking", "greedy", "shortest_paths", "topological", "trees"]