"""Incremental grid percolation models."""

from .union_find import WeightedQuickUnionUF
from .grid import Percolation, SiteStatus
from .virtual_sites import VirtualSitePercolation
from .replay import read_open_sequence, replay

__all__ = [
    'WeightedQuickUnionUF',
    'Percolation',
    'SiteStatus',
    'VirtualSitePercolation',
    'read_open_sequence',
    'replay',
]
