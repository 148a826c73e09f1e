from typing import List, Tuple

from maze_meander.core.errors import MazeInvariantError
from maze_meander.core.grid import Cell, Grid


def solution_path(grid: Grid) -> List[Cell]:
    """
    Ordered cells from the start cell to the finish cell.

    Generated mazes are trees rooted at the start, so the path is recovered
    by following incoming edges back from the finish, no search needed.
    """
    if not grid.goal_reached:
        raise MazeInvariantError("No solution before the finish area has been reached")

    limit = grid.width * grid.height
    curr = grid.finish_cell
    path = [curr]
    while curr.pos != grid.start:
        curr = grid.predecessor(curr)
        path.append(curr)
        if len(path) > limit:
            raise MazeInvariantError("Edge cycle detected while walking back from the finish")

    path.reverse()
    return path


def solution_coords(grid: Grid) -> List[Tuple[int, int]]:
    return [cell.pos for cell in solution_path(grid)]
