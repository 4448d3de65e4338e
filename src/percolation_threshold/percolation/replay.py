"""
Replay pre-recorded open-site sequences.

File format (plain text):
    3
    1 2
    2 2
    3 2

The first non-blank line is the grid size n; every following non-blank line
is a whitespace-separated "row col" pair to open, in file order.
"""

from pathlib import Path
from typing import List, Tuple, Type, Union

from .grid import Percolation


def read_open_sequence(path: Union[str, Path]) -> Tuple[int, List[Tuple[int, int]]]:
    """
    Parse a replay file.

    Args:
        path: Path to the replay text file

    Returns:
        Tuple of (n, sites) where sites is a list of (row, col) pairs

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the size line or a site line is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Replay file not found: {path}")

    n = None
    sites = []

    with open(path, 'r') as f:
        for line_no, line in enumerate(f, start=1):
            tokens = line.split()
            if not tokens:
                continue

            try:
                values = [int(tok) for tok in tokens]
            except ValueError:
                raise ValueError(f"{path}:{line_no}: expected integers, got {line.strip()!r}")

            if n is None:
                if len(values) != 1:
                    raise ValueError(f"{path}:{line_no}: first line must hold the grid size")
                n = values[0]
                continue

            if len(values) != 2:
                raise ValueError(f"{path}:{line_no}: expected 'row col', got {line.strip()!r}")
            sites.append((values[0], values[1]))

    if n is None:
        raise ValueError(f"{path}: missing grid size")

    return n, sites


def replay(path: Union[str, Path], model_cls: Type = Percolation):
    """
    Build a model from a replay file and apply every open in order.

    Args:
        path: Path to the replay text file
        model_cls: Model class to instantiate (Percolation or VirtualSitePercolation)

    Returns:
        The model after all sites have been opened
    """
    n, sites = read_open_sequence(path)
    model = model_cls(n)
    for row, col in sites:
        model.open(row, col)
    return model
