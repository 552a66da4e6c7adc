"""Graph primitives and helpers.

This package provides the fixed-size undirected `WeightedGraph` and the
`convert` module for moving graphs to and from NetworkX.
"""

from greedypath.graph.weighted_graph import COST_ATTR, NeighborCosts, WeightedGraph

__all__ = ["COST_ATTR", "NeighborCosts", "WeightedGraph"]
