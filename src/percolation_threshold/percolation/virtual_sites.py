"""
Two-virtual-site percolation model.

A virtual top site is joined to every open site in row 1 and a virtual
bottom site to every open site in row n; the system percolates when the two
virtual sites share a root. percolates() is correct, but is_full() suffers
from backwash: once the system percolates, every bottom-row component is
joined to the top through the virtual bottom site.

Kept as a reference for comparing against Percolation; the estimator never
uses it.
"""

from typing import Iterator, Tuple

import numpy as np

from .union_find import WeightedQuickUnionUF
from ..exceptions import InvalidArgumentError


class VirtualSitePercolation:
    """
    Percolation model using virtual top and bottom sites.

    Same public surface as Percolation, but is_full() may report sites that
    only touch the bottom row as full.
    """

    def __init__(self, n: int):
        if n <= 0:
            raise InvalidArgumentError(f"n must be greater than 0, got {n}")

        self._n = n
        size = (n + 1) * (n + 1) + 1
        self._top = 0
        self._bottom = size - 1
        self._open = np.zeros(size, dtype=bool)
        self._uf = WeightedQuickUnionUF(size)
        self._open_count = 0

    @property
    def n(self) -> int:
        return self._n

    def _index(self, row: int, col: int) -> int:
        return row * self._n + col

    def _in_bounds(self, row: int, col: int) -> bool:
        return 1 <= row <= self._n and 1 <= col <= self._n

    def _validate(self, row: int, col: int) -> None:
        if not self._in_bounds(row, col):
            raise InvalidArgumentError(
                f"site ({row}, {col}) is outside the {self._n}x{self._n} grid"
            )

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        Row 1 sites are joined to the virtual top and row n sites to the
        virtual bottom.
        """
        self._validate(row, col)
        if self.is_open(row, col):
            return

        current = self._index(row, col)
        self._open[current] = True

        if row == 1:
            self._uf.union(current, self._top)
        if row == self._n:
            self._uf.union(current, self._bottom)

        for nrow, ncol in ((row, col + 1), (row, col - 1), (row + 1, col), (row - 1, col)):
            if self._in_bounds(nrow, ncol) and self.is_open(nrow, ncol):
                self._uf.union(current, self._index(nrow, ncol))

        self._open_count += 1

    def is_open(self, row: int, col: int) -> bool:
        """Is site (row, col) open?"""
        self._validate(row, col)
        return bool(self._open[self._index(row, col)])

    def is_full(self, row: int, col: int) -> bool:
        """
        Is site (row, col) connected to the virtual top?

        After percolation this includes sites that only reach the top through
        the virtual bottom.
        """
        self._validate(row, col)
        if not self.is_open(row, col):
            return False
        return self._uf.connected(self._index(row, col), self._top)

    def number_of_open_sites(self) -> int:
        return self._open_count

    def percolates(self) -> bool:
        """Does the system percolate? Once True, stays True."""
        return self._uf.connected(self._top, self._bottom)

    def open_sites(self) -> Iterator[Tuple[int, int]]:
        """Yield the (row, col) of every open site in row-major order."""
        for row in range(1, self._n + 1):
            for col in range(1, self._n + 1):
                if self.is_open(row, col):
                    yield row, col

    def open_mask(self) -> np.ndarray:
        """Boolean (n, n) array, True where the site is open."""
        coords = np.arange(1, self._n + 1)
        return self._open[coords[:, np.newaxis] * self._n + coords[np.newaxis, :]]

    def full_mask(self) -> np.ndarray:
        """Boolean (n, n) array, True where is_full() holds, backwash included."""
        mask = np.zeros((self._n, self._n), dtype=bool)
        for row, col in self.open_sites():
            mask[row - 1, col - 1] = self.is_full(row, col)
        return mask
