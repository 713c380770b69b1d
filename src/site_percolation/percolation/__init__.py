"""Site percolation grid backed by a union-find forest."""

from .grid import Percolation, PercolationError, InvalidDimension, OutOfRange
from .union_find import SiteForest
from .worker import ReplayResult, replay_sites, process_site_file

__all__ = [
    'Percolation', 'PercolationError', 'InvalidDimension', 'OutOfRange',
    'SiteForest', 'ReplayResult', 'replay_sites', 'process_site_file',
]
