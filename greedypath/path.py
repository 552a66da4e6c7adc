"""Result of a greedy path search.

``PathResult`` pairs an ordered, duplicate-free node sequence with its total
cost. Instances are immutable and order by ``(cost, start_node)``, which is
the same rule the best-of-all-starts selection uses.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Tuple

from greedypath.types import Cost, NodeID, PathTuple


@dataclass(frozen=True)
class PathResult:
    """A path through the graph and its total cost.

    Attributes:
        path: Node ids in visiting order. Never empty.
        cost: Sum of the costs of the traversed edges; 0 for a single node.
    """

    path: PathTuple
    cost: Cost

    def __post_init__(self) -> None:
        """Normalize ``path`` to a tuple."""
        object.__setattr__(self, "path", tuple(self.path))

    def __getitem__(self, idx: int) -> NodeID:
        return self.path[idx]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.path)

    def __len__(self) -> int:
        return len(self.path)

    @property
    def start_node(self) -> NodeID:
        """Return the first node in the path."""
        return self.path[0]

    @property
    def end_node(self) -> NodeID:
        """Return the last node in the path."""
        return self.path[-1]

    def rank(self) -> Tuple[bool, Cost, NodeID]:
        """Return the ordering key: cost, then start node.

        A NaN cost (an ``inf`` edge followed by a ``-inf`` edge, or the
        reverse) ranks after every other cost.
        """
        return (math.isnan(self.cost), self.cost, self.start_node)

    def __lt__(self, other: Any) -> bool:
        """Compare by ``rank()``.

        Returns NotImplemented if ``other`` is not a PathResult.
        """
        if not isinstance(other, PathResult):
            return NotImplemented
        return self.rank() < other.rank()

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {"path": list(self.path), "cost": self.cost, "length": len(self.path)}
