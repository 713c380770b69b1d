"""
Site Percolation - percolation on an n-by-n grid of open/blocked sites.

This package provides:
- A union-find backed grid model answering full/percolates queries in O(1)
- A replay worker for site files
- YAML run configs and the perc-grid command-line interface
"""

__version__ = "1.0.0"
