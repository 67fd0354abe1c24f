"""Multi-dimensional grids built from per-axis lazy sequences."""

from numspace.grid.builders import arange_grid, grid_log_space, grid_space
from numspace.grid.frame import to_frame
from numspace.grid.product import GridProduct

__all__ = ["GridProduct", "grid_space", "grid_log_space", "arange_grid", "to_frame"]
