"""Fixed-size undirected weighted graph.

`WeightedGraph` extends `networkx.Graph` with a fixed node set ``0..n-1``,
validated edge insertion and a read-only neighbour-to-cost view used by the
greedy search. The edge cost lives in the ``cost`` edge attribute, so the
graph can be handed to NetworkX algorithms directly.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Integral, Real
from pickle import dumps, loads
from typing import Any, Dict, Iterable, Iterator, List

import networkx as nx

from greedypath.errors import InvalidArgumentError, InvalidEdgeError, InvalidNodeError
from greedypath.types import Cost, NodeID

COST_ATTR = "cost"


class NeighborCosts(Mapping):
    """Read-only mapping of neighbour id -> edge cost for one node.

    This is a view over the graph's adjacency, not a copy; it reflects edges
    added after it was created.
    """

    __slots__ = ("_adj",)

    def __init__(self, adjacency: Dict[NodeID, Dict[str, Any]]) -> None:
        self._adj = adjacency

    def __getitem__(self, neighbor: NodeID) -> float:
        return self._adj[neighbor][COST_ATTR]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, neighbor: object) -> bool:
        try:
            return neighbor in self._adj
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.items())!r})"


class WeightedGraph(nx.Graph):
    """An undirected weighted graph over a fixed set of integer nodes.

    This class enforces:
      - Nodes are exactly ``0..node_count-1`` and are created up front.
      - No self-loops and no edges to unknown nodes (``InvalidEdgeError``).
      - At most one edge per node pair; re-adding a pair overwrites its cost
        for both directions.
      - Edge costs are real numbers other than NaN.
      - Nodes and edges are never removed.

    Inherits from:
        networkx.Graph
    """

    def __init__(self, node_count: int = 0, **attr: Any) -> None:
        """Initialize a graph with ``node_count`` nodes and no edges.

        Args:
            node_count: Number of nodes; may be zero.
            **attr: Graph attributes forwarded to ``networkx.Graph``.

        Raises:
            InvalidArgumentError: If ``node_count`` is not a non-negative integer.
        """
        if (
            not isinstance(node_count, Integral)
            or isinstance(node_count, bool)
            or node_count < 0
        ):
            raise InvalidArgumentError(
                f"node_count must be a non-negative integer, got {node_count!r}."
            )
        super().__init__(**attr)
        super().add_nodes_from(range(int(node_count)))

    @property
    def node_count(self) -> int:
        """Number of nodes in the graph."""
        return len(self._node)

    def copy(self, as_view: bool = False, pickle: bool = True) -> WeightedGraph:  # type: ignore[override]
        """Create a copy of this graph.

        By default, use pickle-based deep copying. If ``pickle=False``, build
        a graph of the same size and re-add attributes and edges, or return a
        read-only view when ``as_view`` is set.

        Args:
            as_view: If True, return a view instead of a full copy; only used
                if ``pickle=False``.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            WeightedGraph: A new instance (or view) of the graph.
        """
        if pickle:
            return loads(dumps(self))
        if as_view:
            return super().copy(as_view=True)  # type: ignore[return-value]
        graph = self.__class__(self.node_count, **self.graph)
        graph.add_nodes_from(self.nodes(data=True))
        graph.add_edges_from(self.edges(data=True))
        return graph

    def is_valid_node(self, node: Any) -> bool:
        """Return True if ``node`` is an integer in ``[0, node_count)``."""
        return (
            isinstance(node, Integral)
            and not isinstance(node, bool)
            and 0 <= node < len(self._node)
        )

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Update attributes of an existing node.

        Raises:
            InvalidNodeError: If the node is not already part of the graph.
        """
        if not self.is_valid_node(node_for_adding):
            raise InvalidNodeError(
                f"Node set is fixed at {len(self._node)} nodes; "
                f"cannot add node {node_for_adding!r}."
            )
        super().add_node(int(node_for_adding), **attr)

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        """Update attributes of existing nodes, given as ids or ``(id, dict)`` pairs.

        ``update()`` routes through here as well.

        Raises:
            InvalidNodeError: If any node is not already part of the graph.
        """
        for item in nodes_for_adding:
            if (
                isinstance(item, tuple)
                and len(item) == 2
                and isinstance(item[1], Mapping)
            ):
                node, data = item
                self.add_node(node, **{**attr, **data})
            else:
                self.add_node(item, **attr)

    def remove_node(self, n: NodeID) -> None:
        """Always raises; the node set is fixed at construction."""
        raise InvalidNodeError(f"Node set is fixed; cannot remove node {n!r}.")

    def remove_nodes_from(self, nodes: Iterable[NodeID]) -> None:
        """Always raises; the node set is fixed at construction."""
        raise InvalidNodeError("Node set is fixed; cannot remove nodes.")

    #
    # Edge management
    #
    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        node_a: NodeID,
        node_b: NodeID,
        cost: Cost,
    ) -> None:
        """Add an undirected edge between ``node_a`` and ``node_b``.

        Adding an edge between a pair that is already connected replaces the
        cost in both directions.

        Args:
            node_a: One endpoint. Must be a valid node.
            node_b: Other endpoint. Must be a valid node distinct from ``node_a``.
            cost: Edge cost; any real number except NaN.

        Raises:
            InvalidEdgeError: On a self-loop, an out-of-range endpoint or an
                invalid cost.
        """
        if not self.is_valid_node(node_a):
            raise InvalidEdgeError(
                f"Node {node_a!r} is out of range for a graph with "
                f"{len(self._node)} nodes."
            )
        if not self.is_valid_node(node_b):
            raise InvalidEdgeError(
                f"Node {node_b!r} is out of range for a graph with "
                f"{len(self._node)} nodes."
            )
        if node_a == node_b:
            raise InvalidEdgeError(f"Self-loop on node {node_a} is not allowed.")
        if not isinstance(cost, Real) or isinstance(cost, bool):
            raise InvalidEdgeError(
                f"Edge ({node_a}, {node_b}) cost must be a real number, got {cost!r}."
            )
        if math.isnan(cost):
            raise InvalidEdgeError(f"Edge ({node_a}, {node_b}) cost must not be NaN.")

        super().add_edge(int(node_a), int(node_b), **{COST_ATTR: float(cost)})

    def add_edges_from(self, ebunch_to_add: Iterable[Any], **attr: Any) -> None:
        """Add edges from ``(a, b, cost)`` or ``(a, b, {"cost": cost})`` tuples.

        Every edge goes through ``add_edge``, so the same validation applies.

        Raises:
            InvalidEdgeError: If an item is malformed, lacks a cost, or fails
                ``add_edge`` validation.
        """
        for item in ebunch_to_add:
            try:
                node_a, node_b, data = item
            except (TypeError, ValueError):
                raise InvalidEdgeError(
                    f"Expected an (a, b, cost) edge, got {item!r}."
                ) from None
            if isinstance(data, Mapping):
                merged = {**attr, **data}
                if COST_ATTR not in merged:
                    raise InvalidEdgeError(
                        f"Edge ({node_a}, {node_b}) has no '{COST_ATTR}' attribute."
                    )
                data = merged[COST_ATTR]
            self.add_edge(node_a, node_b, data)

    def add_weighted_edges_from(
        self, ebunch_to_add: Iterable[Any], weight: str = COST_ATTR, **attr: Any
    ) -> None:
        """Add ``(a, b, cost)`` edges; only the ``cost`` weight name is supported."""
        if weight != COST_ATTR:
            raise InvalidEdgeError(
                f"Edge weights are stored as '{COST_ATTR}', not '{weight}'."
            )
        self.add_edges_from(ebunch_to_add)

    def remove_edge(self, u: NodeID, v: NodeID) -> None:
        """Always raises; edges are never removed."""
        raise InvalidEdgeError(f"Edges cannot be removed; refused ({u!r}, {v!r}).")

    def remove_edges_from(self, ebunch: Iterable[Any]) -> None:
        """Always raises; edges are never removed."""
        raise InvalidEdgeError("Edges cannot be removed.")

    def clear(self) -> None:
        """Always raises; nodes and edges are never removed."""
        raise InvalidNodeError("Node set is fixed; cannot clear the graph.")

    def clear_edges(self) -> None:
        """Always raises; edges are never removed."""
        raise InvalidEdgeError("Edges cannot be removed.")

    #
    # Queries
    #
    def neighbors(self, n: NodeID) -> NeighborCosts:  # type: ignore[override]
        """Return a read-only neighbour -> cost view for node ``n``.

        Iterating the view yields neighbour ids, as ``networkx.Graph.neighbors``
        does.

        Raises:
            InvalidNodeError: If ``n`` is not a valid node.
        """
        if not self.is_valid_node(n):
            raise InvalidNodeError(
                f"Node {n!r} is out of range for a graph with {len(self._node)} nodes."
            )
        return NeighborCosts(self._adj[n])

    def edge_cost(self, node_a: NodeID, node_b: NodeID) -> float:
        """Return the cost of the edge between ``node_a`` and ``node_b``.

        Raises:
            InvalidEdgeError: If the nodes are not connected.
        """
        try:
            return self._adj[node_a][node_b][COST_ATTR]
        except (KeyError, TypeError):
            raise InvalidEdgeError(f"No edge between {node_a!r} and {node_b!r}.") from None

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain representation: node count and sorted ``[a, b, cost]`` edges."""
        edges: List[List[Any]] = sorted(
            [min(u, v), max(u, v), cost] for u, v, cost in self.edges(data=COST_ATTR)
        )
        return {"node_count": self.node_count, "edges": edges}
