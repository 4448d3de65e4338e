"""
Static rendering of percolation grid state.

Blocked sites are drawn dark, open sites white and full sites light blue.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
from matplotlib.colors import ListedColormap
from matplotlib.figure import Figure

BLOCKED, OPEN, FULL = 0, 1, 2

SITE_COLORS = ListedColormap(['#1a1a1a', '#ffffff', '#6fb7e8'])


def grid_image(model) -> np.ndarray:
    """
    Integer image of the grid state.

    Args:
        model: Percolation or VirtualSitePercolation instance

    Returns:
        (n, n) int array with BLOCKED, OPEN or FULL per site; row 0 is grid row 1
    """
    image = np.full((model.n, model.n), BLOCKED, dtype=np.int8)
    image[model.open_mask()] = OPEN
    image[model.full_mask()] = FULL
    return image


def render_grid(model, output_file: Union[str, Path], title: Optional[str] = None,
                dpi: int = 100) -> Path:
    """
    Render the grid to an image file.

    Args:
        model: Percolation or VirtualSitePercolation instance
        output_file: Destination path (format taken from the suffix)
        title: Plot title (defaults to a summary of the model state)
        dpi: Output resolution

    Returns:
        Path to the saved image
    """
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    if title is None:
        status = 'percolates' if model.percolates() else 'does not percolate'
        title = f"{model.n}x{model.n} grid, {model.number_of_open_sites()} open sites, {status}"

    fig = Figure(figsize=(6, 6))
    ax = fig.add_subplot(1, 1, 1)
    ax.imshow(grid_image(model), cmap=SITE_COLORS, vmin=BLOCKED, vmax=FULL,
              interpolation='nearest')
    ax.set_title(title)
    ax.set_xticks([])
    ax.set_yticks([])

    fig.savefig(output_file, dpi=dpi, bbox_inches='tight')
    return output_file
