"""Grid state rendering."""

from .render import grid_image, render_grid

__all__ = ['grid_image', 'render_grid']
