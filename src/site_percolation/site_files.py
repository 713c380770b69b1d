"""
Reading site files.

A site file is whitespace-separated integers: the grid dimension n followed by
(row, col) pairs in the order the sites are opened, e.g.

    3
    1 1
    2 1   # comments run to end of line
    3 1

Coordinates are not range-checked here; the grid rejects them on replay.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union


@dataclass
class SiteSequence:
    """Grid dimension plus the ordered sites to open."""
    n: int
    sites: List[Tuple[int, int]] = field(default_factory=list)


def parse_sites(text: str) -> SiteSequence:
    """
    Parse site-file contents.

    Args:
        text: File contents

    Returns:
        SiteSequence with the header dimension and the coordinate pairs

    Raises:
        ValueError: If the text is empty, holds a non-integer token, or
            has a dangling coordinate
    """
    tokens = []
    for line in text.splitlines():
        tokens.extend(line.split('#', 1)[0].split())

    if not tokens:
        raise ValueError("Site file is empty: expected a grid dimension")

    values = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"Invalid integer in site file: {token!r}") from None

    n, coords = values[0], values[1:]
    if len(coords) % 2 != 0:
        raise ValueError(f"Site file has an odd number of coordinates ({len(coords)})")

    sites = list(zip(coords[0::2], coords[1::2]))
    return SiteSequence(n=n, sites=sites)


def read_site_file(path: Union[str, Path]) -> SiteSequence:
    """
    Load a site file from disk.

    Args:
        path: Path to the site file

    Returns:
        Parsed SiteSequence
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Site file not found: {path}")

    with open(path, 'r') as f:
        return parse_sites(f.read())
