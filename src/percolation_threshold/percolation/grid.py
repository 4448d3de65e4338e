"""
Incremental site percolation on an n-by-n grid.

Sites are opened one at a time. Each connected component of open sites
carries status flags on its root in the union-find forest: OPEN, TOP (some
member lies in row 1) and BOTTOM (some member lies in row n). Flags are
OR-ed together whenever two components merge.

Top and bottom reachability are kept as independent facts on the root
instead of wiring a virtual bottom site to row n. A virtual bottom site
would join every bottom-row component into one set, so once the system
percolates, sites that only touch the bottom would appear connected to the
top ("backwash"). With flags, is_full() only ever looks at TOP.
"""

from enum import IntFlag
from typing import Iterator, Tuple

import numpy as np

from .union_find import WeightedQuickUnionUF
from ..exceptions import InvalidArgumentError


class SiteStatus(IntFlag):
    """Status bits stored per site and per component root."""
    CLOSED = 0b000
    BOTTOM = 0b001
    TOP = 0b010
    OPEN = 0b100
    PERCOLATES = OPEN | TOP | BOTTOM


class Percolation:
    """
    Percolation model for an n-by-n grid of sites, all initially blocked.

    Sites are addressed by (row, col) with 1 <= row, col <= n and flattened
    to index row * n + col; index 0 is never used.

    Example:
        perc = Percolation(3)
        perc.open(1, 2)
        perc.open(2, 2)
        perc.open(3, 2)
        perc.percolates()   # True
        perc.is_full(3, 2)  # True
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with every site blocked.

        Args:
            n: Grid size (must be >= 1)
        """
        if n <= 0:
            raise InvalidArgumentError(f"n must be greater than 0, got {n}")

        self._n = n
        size = (n + 1) * (n + 1)
        self._status = np.zeros(size, dtype=np.uint8)
        self._uf = WeightedQuickUnionUF(size)
        self._open_count = 0
        self._percolates = False

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

    def _initial_status(self, row: int) -> SiteStatus:
        status = SiteStatus.OPEN
        if row == 1:
            status |= SiteStatus.TOP
        if row == self._n:
            status |= SiteStatus.BOTTOM
        return status

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        Re-opening an open site is a no-op and does not change the open-site
        count.
        """
        self._validate(row, col)
        if self.is_open(row, col):
            return

        status = self._initial_status(row)
        current = self._index(row, col)

        # right, left, down, up
        for nrow, ncol in ((row, col + 1), (row, col - 1), (row + 1, col), (row - 1, col)):
            if not self._in_bounds(nrow, ncol) or not self.is_open(nrow, ncol):
                continue
            neighbor = self._index(nrow, ncol)
            status |= int(self._status[self._uf.find(neighbor)])
            self._uf.union(current, neighbor)

        root = self._uf.find(current)
        self._status[root] = status
        self._status[current] = status

        if (status & SiteStatus.PERCOLATES) == SiteStatus.PERCOLATES:
            self._percolates = True

        self._open_count += 1

    def is_open(self, row: int, col: int) -> bool:
        """Is site (row, col) open?"""
        self._validate(row, col)
        return bool(self._status[self._index(row, col)] & SiteStatus.OPEN)

    def is_full(self, row: int, col: int) -> bool:
        """
        Is site (row, col) full, i.e. connected to row 1 through open sites?

        A blocked site is never full.
        """
        self._validate(row, col)
        if not self.is_open(row, col):
            return False
        root = self._uf.find(self._index(row, col))
        return bool(self._status[root] & SiteStatus.TOP)

    def number_of_open_sites(self) -> int:
        return self._open_count

    def percolates(self) -> bool:
        """Does the system percolate? Once True, stays True."""
        return self._percolates

    # --- Grid views for renderers ---

    def open_sites(self) -> Iterator[Tuple[int, int]]:
        """Yield the (row, col) of every open site in row-major order."""
        for row in range(1, self._n + 1):
            for col in range(1, self._n + 1):
                if self.is_open(row, col):
                    yield row, col

    def open_mask(self) -> np.ndarray:
        """Boolean (n, n) array, True where the site is open."""
        coords = np.arange(1, self._n + 1)
        idx = coords[:, np.newaxis] * self._n + coords[np.newaxis, :]
        return (self._status[idx] & SiteStatus.OPEN) != 0

    def full_mask(self) -> np.ndarray:
        """Boolean (n, n) array, True where the site is full."""
        mask = np.zeros((self._n, self._n), dtype=bool)
        for row, col in self.open_sites():
            mask[row - 1, col - 1] = self.is_full(row, col)
        return mask

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(n={self._n}, open={self._open_count}, "
                f"percolates={self._percolates})")
