"""
Weighted quick-union disjoint-set structure.

Union by size plus path halving keeps every union/find at amortised
near-constant cost. Each instance owns its parent and size arrays, so two
structures over the same universe never interfere.
"""

import numpy as np


class WeightedQuickUnionUF:
    """
    Disjoint-set forest over the elements ``0 .. size-1``.

    Example:
        uf = WeightedQuickUnionUF(4)
        uf.union(0, 1)
        uf.connected(0, 1)   # True
        uf.count             # 3
    """

    def __init__(self, size: int):
        """
        Initialize ``size`` singleton sets.

        Args:
            size: Number of elements in the universe
        """
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")

        self.size = int(size)
        self.parent = np.arange(self.size, dtype=np.int64)
        self._sizes = np.ones(self.size, dtype=np.int64)
        self._count = self.size

    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def _validate(self, p: int) -> None:
        if p < 0 or p >= self.size:
            raise IndexError(f"element {p} is not between 0 and {self.size - 1}")

    def find(self, p: int) -> int:
        """
        Return the root of the set containing ``p``.

        Every visited node is re-pointed at its grandparent (path halving).
        """
        self._validate(p)
        parent = self.parent
        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return int(p)

    def connected(self, p: int, q: int) -> bool:
        """Whether ``p`` and ``q`` are in the same set."""
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """
        Merge the sets containing ``p`` and ``q``.

        Returns:
            True if two distinct sets were merged, False if already connected
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False

        sizes = self._sizes
        # Smaller tree goes under the larger one
        if sizes[root_p] < sizes[root_q]:
            root_p, root_q = root_q, root_p
        self.parent[root_q] = root_p
        sizes[root_p] += sizes[root_q]
        self._count -= 1
        return True

    def component_size(self, p: int) -> int:
        """Number of elements in the set containing ``p``."""
        return int(self._sizes[self.find(p)])

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"WeightedQuickUnionUF(size={self.size}, count={self._count})"
