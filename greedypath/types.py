"""Shared type aliases."""

from __future__ import annotations

from typing import Tuple, Union

#: Node identifier: an integer index in ``[0, node_count)``.
NodeID = int

#: Numeric edge or path cost.
Cost = Union[int, float]

#: Ordered, duplicate-free sequence of node ids.
PathTuple = Tuple[NodeID, ...]

#: Edge given as ``(node_a, node_b, cost)``.
EdgeTriple = Tuple[NodeID, NodeID, Cost]
