"""Configuration for greedy path search."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Defaults for the best-of-all-starts search."""

    # Worker threads used when the caller does not ask for a specific number
    parallelism: int = 1

    # Upper bound on worker threads regardless of what is requested
    max_parallelism: int = 32

    def effective_workers(self, requested: Optional[int], node_count: int) -> int:
        """Return the number of workers to use for ``node_count`` start nodes.

        ``None`` falls back to ``parallelism``. The result is clamped to
        ``[1, min(max_parallelism, node_count)]``.
        """
        workers = self.parallelism if requested is None else requested
        upper = max(1, min(self.max_parallelism, node_count))
        return max(1, min(int(workers), upper))


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
