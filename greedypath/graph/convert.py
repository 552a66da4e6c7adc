"""Conversion between NetworkX graphs and `WeightedGraph`.

NetworkX graphs may use any hashable node names, while `WeightedGraph` uses
contiguous integer ids. `NodeMap` records the mapping so search results can
be translated back to the original names.

Example:
    >>> import networkx as nx
    >>> from greedypath.graph.convert import from_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", cost=1.0)
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["A"]
    0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

import networkx as nx

from greedypath.errors import InvalidArgumentError
from greedypath.graph.weighted_graph import COST_ATTR, WeightedGraph
from greedypath.logging import get_logger
from greedypath.types import NodeID

logger = get_logger(__name__)


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, nodes: Sequence[NodeID]) -> List[Hashable]:
        """Translate a sequence of node ids (e.g. a path) back to names."""
        return [self.to_name[node] for node in nodes]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: Any,
    *,
    cost_attr: str = "cost",
    default_cost: Optional[float] = None,
    sort_nodes: bool = False,
) -> Tuple[WeightedGraph, NodeMap]:
    """Convert an undirected NetworkX graph into a `WeightedGraph`.

    Args:
        G: Undirected, non-multi NetworkX graph.
        cost_attr: Edge attribute holding the cost.
        default_cost: Cost for edges without ``cost_attr``. When ``None``,
            such edges raise ``InvalidArgumentError``.
        sort_nodes: Assign indices in sorted node order instead of the
            graph's insertion order.

    Returns:
        ``(graph, node_map)``.

    Raises:
        InvalidArgumentError: For directed graphs, multigraphs, or edges
            missing a cost when no default is given.
        InvalidEdgeError: For self-loops or invalid costs.
    """
    if G.is_directed():
        raise InvalidArgumentError("Directed graphs are not supported.")
    if G.is_multigraph():
        raise InvalidArgumentError("Multigraphs are not supported.")

    names: List[Hashable] = sorted(G.nodes) if sort_nodes else list(G.nodes)
    node_map = NodeMap.from_names(names)
    graph = WeightedGraph(len(names))

    for u, v, data in G.edges(data=True):
        cost = data.get(cost_attr, default_cost)
        if cost is None:
            raise InvalidArgumentError(
                f"Edge ({u!r}, {v!r}) has no '{cost_attr}' attribute."
            )
        graph.add_edge(node_map.to_index[u], node_map.to_index[v], cost)

    logger.debug(
        f"Converted NetworkX graph with {len(names)} nodes and "
        f"{graph.number_of_edges()} edges"
    )
    return graph, node_map


def to_networkx(
    graph: WeightedGraph,
    node_map: Optional[NodeMap] = None,
    *,
    cost_attr: str = "cost",
) -> nx.Graph:
    """Convert a `WeightedGraph` into a plain ``networkx.Graph``.

    Args:
        graph: Graph to convert.
        node_map: When given, nodes are relabelled with their original names.
        cost_attr: Edge attribute name for the cost in the output graph.

    Returns:
        A new ``networkx.Graph``.
    """

    def name(node: NodeID) -> Hashable:
        return node_map.to_name[node] if node_map is not None else node

    nx_graph = nx.Graph()
    nx_graph.add_nodes_from(name(node) for node in range(graph.node_count))
    for u, v, cost in graph.edges(data=COST_ATTR):
        nx_graph.add_edge(name(u), name(v), **{cost_attr: cost})
    return nx_graph
