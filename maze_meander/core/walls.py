from typing import NamedTuple

import numpy as np

from maze_meander.core.direction import Direction
from maze_meander.core.grid import Grid


class WallLayout(NamedTuple):
    # horizontal[x, y]: wall along the south side of row y (y == height is the north border)
    horizontal: np.ndarray
    # vertical[x, y]: wall along the west side of column x (x == width is the east border)
    vertical: np.ndarray

    @property
    def passage_count(self) -> int:
        """Inner walls that are open."""
        inner_h = self.horizontal[:, 1:-1]
        inner_v = self.vertical[1:-1, :]
        return int(inner_h.size - inner_h.sum() + inner_v.size - inner_v.sum())


def cell_arrays(grid: Grid):
    """
    Dense views of the grid for renderers: edges (width, height, 4) indexed by
    Direction.value, plus start/finish/visited masks of shape (width, height).
    """
    w, h = grid.width, grid.height
    edges = np.zeros((w, h, 4), dtype=bool)
    start = np.zeros((w, h), dtype=bool)
    finish = np.zeros((w, h), dtype=bool)
    visited = np.zeros((w, h), dtype=bool)
    for cell in grid.iter_cells():
        edges[cell.x, cell.y] = cell.edges
        start[cell.x, cell.y] = cell.start_area
        finish[cell.x, cell.y] = cell.finish_area
        visited[cell.x, cell.y] = cell.visited
    return edges, start, finish, visited


def wall_layout(grid: Grid) -> WallLayout:
    """Which wall segments a renderer must draw for a generated grid."""
    edges, start, finish, _ = cell_arrays(grid)
    w, h = grid.width, grid.height

    horizontal = np.ones((w, h + 1), dtype=bool)
    # Between (x, y-1) below and (x, y) above
    below, above = slice(0, h - 1), slice(1, h)
    open_h = (
        edges[:, below, Direction.NORTH.value]
        | edges[:, above, Direction.SOUTH.value]
        | (start[:, below] & start[:, above])
        | (finish[:, below] & finish[:, above])
    )
    horizontal[:, 1:h] = ~open_h

    vertical = np.ones((w + 1, h), dtype=bool)
    # Between (x-1, y) on the left and (x, y) on the right
    left, right = slice(0, w - 1), slice(1, w)
    open_v = (
        edges[left, :, Direction.EAST.value]
        | edges[right, :, Direction.WEST.value]
        | (start[left, :] & start[right, :])
        | (finish[left, :] & finish[right, :])
    )
    vertical[1:w, :] = ~open_v

    return WallLayout(horizontal, vertical)
