"""greedypath: greedy fixed-length paths over weighted graphs.

Builds a fixed-size undirected weighted graph and finds a low-cost path with
a given number of nodes by extending each path to its cheapest unvisited
neighbour, trying every start node and keeping the cheapest result.

Primary API:
    WeightedGraph - Fixed-size undirected weighted graph
    find_path() - Greedy path from a single start node
    find_all_paths() - Greedy paths from every start node
    select_best() - Cheapest greedy path over all start nodes
    PathResult - Path and its total cost

Example:
    from greedypath import WeightedGraph, select_best

    g = WeightedGraph(3)
    g.add_edge(0, 1, 1.0)
    g.add_edge(1, 2, 1.0)
    g.add_edge(0, 2, 5.0)

    best = select_best(g, 3)
    if best is not None:
        print(best.path, best.cost)
"""

from __future__ import annotations

from greedypath import logging
from greedypath._version import __version__
from greedypath.algorithms.greedy import find_path
from greedypath.algorithms.selector import find_all_paths, select_best
from greedypath.config import SEARCH_CONFIG, SearchConfig
from greedypath.errors import (
    GraphError,
    InvalidArgumentError,
    InvalidEdgeError,
    InvalidNodeError,
)
from greedypath.graph.convert import NodeMap, from_networkx, to_networkx
from greedypath.graph.weighted_graph import NeighborCosts, WeightedGraph
from greedypath.io import Problem, ProblemFormatError, format_result, load_problem
from greedypath.path import PathResult

__all__ = [
    # Version
    "__version__",
    # Graph
    "WeightedGraph",
    "NeighborCosts",
    # Search
    "find_path",
    "find_all_paths",
    "select_best",
    "PathResult",
    # Errors
    "GraphError",
    "InvalidEdgeError",
    "InvalidNodeError",
    "InvalidArgumentError",
    "ProblemFormatError",
    # Input/output
    "Problem",
    "load_problem",
    "format_result",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
