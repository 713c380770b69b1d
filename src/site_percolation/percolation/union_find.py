"""
Disjoint-set forest used by the percolation grid.

Nodes are plain integer indices into a fixed-size numpy parent array. Roots are
found iteratively with partial path compression (every visited node is relinked
to its grandparent) and unions attach the larger root under the smaller one, so
results are deterministic for a given sequence of calls.
"""

import numpy as np


class SiteForest:
    """
    Union-find forest over the integer universe [0, size).

    Every node starts as its own root. There is no union-by-rank; the
    min-root tie-break keeps the forest shallow enough in practice and path
    compression takes care of the rest.
    """

    def __init__(self, size: int):
        """
        Initialize the forest.

        Args:
            size: Number of nodes in the universe
        """
        if size <= 0:
            raise ValueError("size must be positive")
        self.size = size
        self._parent = np.arange(size, dtype=np.int64)

    def root(self, i: int) -> int:
        """
        Find the representative of the set containing i.

        Args:
            i: Node index

        Returns:
            Index of the root node

        Raises:
            ValueError: If i is outside [0, size)
        """
        if not 0 <= i < self.size:
            raise ValueError(f"index {i} is not between 0 and {self.size - 1}")
        parent = self._parent
        while i != parent[i]:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return int(i)

    def union(self, i1: int, i2: int) -> None:
        """Merge the sets containing i1 and i2 (larger root goes under the smaller)."""
        r1 = self.root(i1)
        r2 = self.root(i2)
        if r1 == r2:
            return
        self._parent[max(r1, r2)] = min(r1, r2)

    def connected(self, i1: int, i2: int) -> bool:
        return self.root(i1) == self.root(i2)
