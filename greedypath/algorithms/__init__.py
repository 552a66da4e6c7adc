"""Path search algorithms."""

from greedypath.algorithms.greedy import find_path
from greedypath.algorithms.selector import find_all_paths, select_best

__all__ = ["find_path", "find_all_paths", "select_best"]
