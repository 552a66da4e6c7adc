"""Best-of-all-starts selection over greedy paths.

Runs the greedy search from every node and keeps the cheapest successful
path. The per-start searches only read the graph, so they may run on a
thread pool; results are always reduced in ascending start order, which
makes the outcome independent of the number of workers.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Optional

from greedypath.algorithms.greedy import find_path, validate_target_length
from greedypath.config import SEARCH_CONFIG
from greedypath.graph.weighted_graph import WeightedGraph
from greedypath.logging import get_logger
from greedypath.path import PathResult
from greedypath.types import NodeID

logger = get_logger(__name__)


def find_all_paths(
    graph: WeightedGraph,
    target_length: int,
    parallelism: Optional[int] = None,
) -> Dict[NodeID, PathResult]:
    """Run the greedy search from every start node.

    Args:
        graph: Graph to search. Not modified.
        target_length: Number of nodes per path, at least 1.
        parallelism: Worker threads; ``None`` uses ``SEARCH_CONFIG.parallelism``.

    Returns:
        Successful results keyed by start node, in ascending start order.
        Start nodes that yield no path are absent.

    Raises:
        InvalidArgumentError: If ``target_length`` is not an integer >= 1.
    """
    validate_target_length(target_length)

    starts = range(graph.node_count)
    workers = SEARCH_CONFIG.effective_workers(parallelism, graph.node_count)
    outcomes: Dict[NodeID, Optional[PathResult]] = {}

    if workers > 1:
        logger.debug(f"Searching {len(starts)} start nodes with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(find_path, graph, start, target_length): start
                for start in starts
            }
            for future in as_completed(futures):
                outcomes[futures[future]] = future.result()
    else:
        for start in starts:
            outcomes[start] = find_path(graph, start, target_length)

    results: Dict[NodeID, PathResult] = {}
    for start in starts:
        result = outcomes[start]
        if result is not None:
            results[start] = result

    logger.debug(
        f"{len(results)} of {len(starts)} start nodes produced a path "
        f"of {target_length} nodes"
    )
    return results


def select_best(
    graph: WeightedGraph,
    target_length: int,
    parallelism: Optional[int] = None,
) -> Optional[PathResult]:
    """Return the cheapest greedy path of ``target_length`` nodes over all starts.

    Ties on cost go to the path with the lowest start node. A path whose
    cost is NaN (it crossed both an ``inf`` and a ``-inf`` edge) is only
    chosen when every path has a NaN cost.

    Args:
        graph: Graph to search. Not modified.
        target_length: Number of nodes in the path, at least 1.
        parallelism: Worker threads; ``None`` uses ``SEARCH_CONFIG.parallelism``.

    Returns:
        The best result, or None if no start node yields a path.

    Raises:
        InvalidArgumentError: If ``target_length`` is not an integer >= 1.
    """
    best: Optional[PathResult] = None
    for result in find_all_paths(graph, target_length, parallelism).values():
        if best is None or result.rank() < best.rank():
            best = result

    if best is None:
        logger.debug(f"No start node yields a path of {target_length} nodes")
    else:
        logger.debug(f"Best path starts at {best.start_node} with cost {best.cost}")
    return best
