"""
Site percolation on an n-by-n grid.

Sites are addressed by 1-based (row, col) and stored in row-major order at
index (row-1)*n + col. Two virtual anchors live outside that range: TOP at
index 0 and BOTTOM at index n*n + 1.

Connectivity is tracked in two forests. The full forest only ever links TOP,
so a bottom-row site cannot be reported full just because it touches another
bottom-row site that is connected to the top (backwash). The percolation
forest additionally links BOTTOM and answers percolates() with one root
comparison.
"""

import numbers

import numpy as np

from .union_find import SiteForest


TOP = 0


class PercolationError(ValueError):
    """Base class for invalid arguments passed to a percolation grid."""


class InvalidDimension(PercolationError):
    """Raised when a grid is constructed with a non-positive dimension."""


class OutOfRange(PercolationError):
    """Raised when a row or column is not an integer in [1, n]."""


class Percolation:
    """
    Percolation model for an n-by-n grid of open/blocked sites.

    All sites start blocked. Opening is monotonic: a site never closes again.

    Example:
        perc = Percolation(2)
        perc.open(1, 1)
        perc.open(2, 1)
        perc.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with every site blocked.

        Args:
            n: Grid dimension, must be a positive integer

        Raises:
            InvalidDimension: If n is not a positive integer
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise InvalidDimension(f"Grid dimension must be an integer, got {n!r}")
        if n <= 0:
            raise InvalidDimension(f"Grid dimension must be positive, got {n}")

        self._n = int(n)
        self._size = self._n * self._n
        self._bottom = self._size + 1

        self._open = np.zeros(self._size + 2, dtype=bool)
        self._num_open = 0

        self._full_forest = SiteForest(self._size + 2)
        self._percolation_forest = SiteForest(self._size + 2)

    @property
    def n(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return (f"Percolation(n={self._n}, open_sites={self._num_open}, "
                f"percolates={self.percolates()})")

    # --- Public operations ---

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        Args:
            row: 1-based row
            col: 1-based column

        Raises:
            OutOfRange: If row or col is outside [1, n]
        """
        self._validate(row, col)
        idx = self._index(row, col)
        if self._open[idx]:
            return

        self._open[idx] = True
        self._num_open += 1

        if row == 1:
            self._union(idx, TOP)
        if row == self._n:
            self._percolation_forest.union(idx, self._bottom)

        if col > 1:
            self._union_if_open(idx, idx - 1)
        if col < self._n:
            self._union_if_open(idx, idx + 1)
        if row > 1:
            self._union_if_open(idx, idx - self._n)
        if row < self._n:
            self._union_if_open(idx, idx + self._n)

    def is_open(self, row: int, col: int) -> bool:
        """Is site (row, col) open?"""
        self._validate(row, col)
        return bool(self._open[self._index(row, col)])

    def is_full(self, row: int, col: int) -> bool:
        """
        Is site (row, col) full, i.e. open and connected to the top row
        through a chain of open neighbours?
        """
        self._validate(row, col)
        idx = self._index(row, col)
        return bool(self._open[idx]) and self._full_forest.connected(idx, TOP)

    def number_of_open_sites(self) -> int:
        return self._num_open

    def percolates(self) -> bool:
        """Does an open path connect the top row to the bottom row?"""
        return self._percolation_forest.connected(TOP, self._bottom)

    # --- Helpers ---

    def _validate(self, row: int, col: int) -> None:
        for name, value in (('Row', row), ('Column', col)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise OutOfRange(f"{name} must be an integer, got {value!r}")
            if not 1 <= value <= self._n:
                raise OutOfRange(f"{name} must be between 1 and {self._n}, got {value}")

    def _index(self, row: int, col: int) -> int:
        return (int(row) - 1) * self._n + int(col)

    def _union(self, i1: int, i2: int) -> None:
        self._full_forest.union(i1, i2)
        self._percolation_forest.union(i1, i2)

    def _union_if_open(self, idx: int, adj: int) -> None:
        if self._open[adj]:
            self._union(idx, adj)
