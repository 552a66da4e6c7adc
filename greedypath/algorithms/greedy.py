"""Greedy nearest-unvisited-neighbour path search."""

from __future__ import annotations

from numbers import Integral
from typing import List, Optional, Set, Tuple

from greedypath.errors import InvalidArgumentError, InvalidNodeError
from greedypath.graph.weighted_graph import NeighborCosts, WeightedGraph
from greedypath.logging import get_logger
from greedypath.path import PathResult
from greedypath.types import NodeID

logger = get_logger(__name__)


def validate_target_length(target_length: int) -> None:
    """Raise ``InvalidArgumentError`` unless ``target_length`` is an integer >= 1."""
    if (
        not isinstance(target_length, Integral)
        or isinstance(target_length, bool)
        or target_length < 1
    ):
        raise InvalidArgumentError(
            f"target_length must be an integer >= 1, got {target_length!r}."
        )


def nearest_unvisited(
    neighbors: NeighborCosts, visited: Set[NodeID]
) -> Optional[Tuple[NodeID, float]]:
    """Return ``(node, cost)`` of the cheapest neighbour not in ``visited``.

    Equal costs are resolved in favour of the smallest node id. Returns None
    when every neighbour has been visited.
    """
    best = min(
        ((cost, node) for node, cost in neighbors.items() if node not in visited),
        default=None,
    )
    if best is None:
        return None
    cost, node = best
    return node, cost


def find_path(
    graph: WeightedGraph,
    start: NodeID,
    target_length: int,
) -> Optional[PathResult]:
    """Find a greedy path of ``target_length`` nodes beginning at ``start``.

    Starting from ``start``, the path is repeatedly extended to the cheapest
    neighbour of its last node that is not already on the path (lowest node
    id on ties). Earlier choices are never revisited, so the result is not
    necessarily the cheapest path of that length.

    Args:
        graph: Graph to search. Not modified.
        start: Start node; must be a valid node of ``graph``.
        target_length: Number of nodes in the path, at least 1.

    Returns:
        The path and its total cost, or None if the search reaches a node with
        no unvisited neighbour before the path is long enough.

    Raises:
        InvalidArgumentError: If ``target_length`` is not an integer >= 1.
        InvalidNodeError: If ``start`` is not a node of ``graph``.
    """
    validate_target_length(target_length)
    if not graph.is_valid_node(start):
        raise InvalidNodeError(
            f"Start node {start!r} is out of range for a graph with "
            f"{graph.node_count} nodes."
        )

    start = int(start)
    path: List[NodeID] = [start]
    visited: Set[NodeID] = {start}
    cost = 0.0

    for _ in range(target_length - 1):
        nearest = nearest_unvisited(graph.neighbors(path[-1]), visited)
        if nearest is None:
            logger.debug(
                f"No path of {target_length} nodes from {start}: "
                f"stuck at {path[-1]} after {len(path)} nodes"
            )
            return None

        node, edge_cost = nearest
        path.append(node)
        visited.add(node)
        cost += edge_cost

    return PathResult(path=tuple(path), cost=cost)
