"""Exception types raised by greedypath.

All graph and search precondition violations derive from ``GraphError``,
which itself subclasses ``ValueError`` so callers that already catch
``ValueError`` keep working. A search that simply finds nothing is not an
error and is reported as ``None`` instead.
"""

from __future__ import annotations


class GraphError(ValueError):
    """Base class for structural graph and search argument errors."""


class InvalidEdgeError(GraphError):
    """Raised for self-loops, out-of-range endpoints, bad costs or missing edges."""


class InvalidNodeError(GraphError):
    """Raised when a node id is outside ``[0, node_count)``."""


class InvalidArgumentError(GraphError):
    """Raised for invalid search or construction arguments (e.g. ``target_length < 1``)."""
