"""
Replay worker: opens a sequence of sites on a fresh grid and summarizes the result.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from .grid import Percolation
from ..site_files import read_site_file


@dataclass
class ReplayResult:
    """Summary of one replayed site sequence."""
    n: int
    sites_read: int
    open_sites: int
    percolates: bool
    percolated_after: Optional[int] = None  # 1-based position of the percolating open

    @property
    def open_fraction(self) -> float:
        return self.open_sites / (self.n * self.n)

    def summary(self) -> str:
        """One-line human-readable summary."""
        line = (f"n={self.n} sites_read={self.sites_read} open={self.open_sites} "
                f"fraction={self.open_fraction:.4f} percolates={'yes' if self.percolates else 'no'}")
        if self.percolated_after is not None:
            line += f" percolated_after={self.percolated_after}"
        return line


def replay_sites(
    n: int,
    sites: Iterable[Tuple[int, int]],
    stop_on_percolation: bool = False,
) -> Tuple[Percolation, ReplayResult]:
    """
    Open sites in order on a new n-by-n grid.

    Args:
        n: Grid dimension
        sites: (row, col) pairs, 1-based
        stop_on_percolation: Stop reading sites right after the system percolates

    Returns:
        Tuple of (grid, ReplayResult)

    Raises:
        InvalidDimension: If n is not positive
        OutOfRange: If a site lies outside the grid
    """
    perc = Percolation(n)
    percolated_after = None
    sites_read = 0

    for row, col in sites:
        perc.open(row, col)
        sites_read += 1
        if percolated_after is None and perc.percolates():
            percolated_after = sites_read
            if stop_on_percolation:
                break

    result = ReplayResult(
        n=perc.n,
        sites_read=sites_read,
        open_sites=perc.number_of_open_sites(),
        percolates=perc.percolates(),
        percolated_after=percolated_after,
    )
    return perc, result


def process_site_file(
    site_file: Union[str, Path],
    stop_on_percolation: bool = False,
) -> Tuple[Percolation, ReplayResult]:
    """
    Read a site file and replay it.

    Args:
        site_file: Path to the site file
        stop_on_percolation: Stop reading sites right after the system percolates

    Returns:
        Tuple of (grid, ReplayResult)
    """
    sequence = read_site_file(site_file)
    return replay_sites(sequence.n, sequence.sites, stop_on_percolation=stop_on_percolation)
