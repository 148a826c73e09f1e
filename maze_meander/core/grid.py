from typing import Iterator, List, Optional, Tuple

from maze_meander.core.direction import Direction
from maze_meander.core.errors import MazeConfigError, MazeInvariantError


class Cell:
    """
    One grid position. Coordinates, type and region flags are fixed at
    construction; 'edges' and 'visited' are only ever switched on.
    """
    __slots__ = ('x', 'y', 'cell_type', 'edges', 'visited', 'start_area', 'finish_area')

    def __init__(self, x: int, y: int, cell_type: int = 1,
                 start_area: bool = False, finish_area: bool = False):
        self.x = x
        self.y = y
        self.cell_type = cell_type
        # Indexed by Direction.value: N, E, S, W
        self.edges = [False, False, False, False]
        self.visited = False
        self.start_area = start_area
        self.finish_area = finish_area

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def has_edge(self, direction: Direction) -> bool:
        return self.edges[direction.value]

    def draw_edge(self, direction: Direction):
        self.edges[direction.value] = True

    def mark_as_visited(self):
        self.visited = True

    def __repr__(self) -> str:
        return f"Cell({self.x}, {self.y}, type={self.cell_type})"


class Grid:
    # Cells whose normalized distance from the center is inside this radius
    # get type 0, everything else type 1.
    CIRCLE_THRESHOLD = 0.15

    __slots__ = ('width', 'height', 'start_finish_size', 'cells',
                 'goal_reached', 'finish', 'start')

    def __init__(self, width: int, height: int, start_finish_size: int = 3):
        for name, value in (('width', width), ('height', height), ('start_finish_size', start_finish_size)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise MazeConfigError(f"{name} must be an integer, got {value!r}")
        if width < 1 or height < 1:
            raise MazeConfigError(f"Grid dimensions must be positive, got {width}x{height}")
        if start_finish_size < 1:
            raise MazeConfigError(f"Start/finish size must be positive, got {start_finish_size}")
        if start_finish_size >= min(width, height) / 2:
            raise MazeConfigError(
                f"Start/finish size {start_finish_size} too large for {width}x{height} grid "
                f"(must be below {min(width, height) / 2})"
            )

        self.width = width
        self.height = height
        self.start_finish_size = start_finish_size
        self.goal_reached = False
        self.finish: Optional[Tuple[int, int]] = None
        # Top-left cell of the start zone, so it borders the maze proper
        self.start: Tuple[int, int] = (0, start_finish_size - 1)

        s = start_finish_size
        self.cells: List[Cell] = []
        for y in range(height):
            for x in range(width):
                self.cells.append(Cell(
                    x, y,
                    cell_type=self.classify(x, y),
                    start_area=x < s and y < s,
                    finish_area=x >= width - s and y >= height - s,
                ))

    def classify(self, x: int, y: int) -> int:
        # Both axes are scaled by width, as the circle is sized to the page width
        dist = ((x - self.width / 2.0) / self.width) ** 2 + ((y - self.height / 2.0) / self.width) ** 2
        return 0 if dist < self.CIRCLE_THRESHOLD else 1

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[self.get_index(x, y)]

    def iter_cells(self) -> Iterator[Cell]:
        return iter(self.cells)

    @property
    def start_cell(self) -> Cell:
        return self.cell(*self.start)

    @property
    def finish_cell(self) -> Optional[Cell]:
        if self.finish is None:
            return None
        return self.cell(*self.finish)

    def adjacent(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """Neighbor of 'cell' in 'direction', or None if that leaves the grid."""
        nx, ny = cell.x + direction.dx, cell.y + direction.dy
        if 0 <= nx < self.width and 0 <= ny < self.height:
            return self.cells[ny * self.width + nx]
        return None

    def get_neighbors(self, cell: Cell) -> Iterator[Tuple[Cell, Direction]]:
        """
        Yields (neighbor, direction_to_neighbor) for all in-bounds neighbors.
        Does NOT check visited state or regions.
        """
        for direction in Direction:
            neighbor = self.adjacent(cell, direction)
            if neighbor is not None:
                yield neighbor, direction

    def is_valid_move(self, cell: Cell, direction: Direction) -> bool:
        target = self.adjacent(cell, direction)
        if target is None:
            return False
        if target.visited or target.start_area:
            return False
        # Only the first path into the finish zone gets in
        if target.finish_area and self.goal_reached:
            return False
        return True

    def record_edge(self, cell: Cell, direction: Direction) -> Cell:
        """
        Draws the edge from 'cell' toward 'direction' and marks the neighbor
        visited. The caller is expected to have checked is_valid_move().
        """
        target = self.adjacent(cell, direction)
        if target is None:
            raise MazeInvariantError(f"Cannot draw edge {direction} off the grid from {cell.pos}")
        cell.draw_edge(direction)
        target.mark_as_visited()
        return target

    def mark_goal(self, cell: Cell):
        self.goal_reached = True
        self.finish = cell.pos

    def incoming_direction(self, cell: Cell) -> Optional[Direction]:
        """
        Direction of the edge that arrives at 'cell', i.e. the direction of
        travel from its predecessor. None for the start cell and for cells
        never reached.
        """
        for direction in Direction:
            neighbor = self.adjacent(cell, direction)
            if neighbor is not None and neighbor.has_edge(direction.opposite()):
                return direction.opposite()
        return None

    def predecessor(self, cell: Cell) -> Cell:
        incoming = self.incoming_direction(cell)
        if incoming is None:
            raise MazeInvariantError(f"Cell {cell.pos} has no incoming edge")
        return self.adjacent(cell, incoming.opposite())

    def connections(self, cell: Cell) -> int:
        """Number of passages touching 'cell', counting edges in both directions."""
        count = 0
        for neighbor, direction in self.get_neighbors(cell):
            if cell.has_edge(direction) or neighbor.has_edge(direction.opposite()):
                count += 1
        return count

    def visited_count(self) -> int:
        return sum(1 for c in self.cells if c.visited)
