"""
Site percolation model on an n-by-n grid.

Sites are addressed by 1-indexed (row, col) pairs and mapped to linear
indices 1..n*n. Index 0 is a virtual top site and index n*n+1 a virtual
bottom site, which turn "does any top site reach any bottom site" into a
single connectivity query.

Two union-find structures are maintained:

- the full-system structure (virtual top and bottom) answers ``percolates``;
- the top-only structure (virtual top only) answers ``is_full``.

Fullness is never read from the full-system structure. Once the grid
percolates, every bottom-row site is connected to the virtual bottom and
hence to the virtual top there, even bottom sites with no open path to
the top row (backwash).
"""

import numbers

import numpy as np

from .union_find import WeightedQuickUnionUF


class InvalidArgumentError(ValueError):
    """Raised for a grid size below 1 or a coordinate outside [1, n]."""


class Percolation:
    """
    Incremental site percolation on an n-by-n grid.

    Sites only ever open; the model has no terminal state of its own.

    Example:
        p = Percolation(2)
        p.open(1, 1)
        p.open(2, 1)
        p.percolates()   # True
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with every site closed.

        Args:
            n: Number of rows and columns, at least 1

        Raises:
            InvalidArgumentError: If n is not an integer >= 1
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise InvalidArgumentError(f"Grid size must be an integer, got {n!r}")
        if n < 1:
            raise InvalidArgumentError(f"Invalid grid size: {n}")

        self.n = int(n)
        self.top = 0
        self.bottom = self.n * self.n + 1

        self._system = WeightedQuickUnionUF(self.n * self.n + 2)
        self._top_only = WeightedQuickUnionUF(self.n * self.n + 1)

        self._opened = np.zeros(self.n * self.n + 2, dtype=bool)
        self._open_count = 0

        # Virtual sites are permanently open for bookkeeping
        self._opened[self.top] = True
        self._opened[self.bottom] = True

    @property
    def grid_size(self) -> int:
        return self.n

    def _validate(self, row: int, col: int) -> None:
        for name, value in (('row', row), ('col', col)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
            if value < 1 or value > self.n:
                raise InvalidArgumentError(
                    f"{name} index {value} out of bounds, expected 1..{self.n}"
                )

    def _index(self, row: int, col: int) -> int:
        return self.n * (row - 1) + col

    def site_index(self, row: int, col: int) -> int:
        """
        Linear index of a site.

        Returns:
            Index in [1, n*n]
        """
        self._validate(row, col)
        return self._index(row, col)

    def _neighbors(self, row: int, col: int):
        """Yield linear indices of the in-grid neighbours of (row, col)."""
        if row > 1:
            yield self._index(row - 1, col)
        if row < self.n:
            yield self._index(row + 1, col)
        if col > 1:
            yield self._index(row, col - 1)
        if col < self.n:
            yield self._index(row, col + 1)

    def _connect(self, p: int, q: int) -> None:
        self._system.union(p, q)
        self._top_only.union(p, q)

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) and connect it to its open neighbours.

        Opening an already open site does nothing.

        Raises:
            InvalidArgumentError: If row or col is outside [1, n]
        """
        self._validate(row, col)

        site = self._index(row, col)
        if self._opened[site]:
            return

        self._opened[site] = True
        self._open_count += 1

        for neighbor in self._neighbors(row, col):
            if self._opened[neighbor]:
                self._connect(site, neighbor)

        if row == 1:
            self._connect(site, self.top)
        # The bottom is only known to the full-system structure
        if row == self.n:
            self._system.union(site, self.bottom)

    def is_open(self, row: int, col: int) -> bool:
        """Whether site (row, col) is open."""
        self._validate(row, col)
        return bool(self._opened[self._index(row, col)])

    def is_full(self, row: int, col: int) -> bool:
        """Whether site (row, col) is connected to the top row through open sites."""
        self._validate(row, col)
        return self._top_only.connected(self.top, self._index(row, col))

    def number_of_open_sites(self) -> int:
        return self._open_count

    def percolates(self) -> bool:
        """Whether an open path joins the top row to the bottom row."""
        return self._system.connected(self.top, self.bottom)

    def __repr__(self) -> str:
        return (f"Percolation(n={self.n}, open_sites={self._open_count}, "
                f"percolates={self.percolates()})")
