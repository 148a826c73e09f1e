from typing import List, Optional, Sequence, Tuple

from maze_meander.algo.sampling import Sampler
from maze_meander.core.direction import Direction
from maze_meander.core.errors import MazeConfigError
from maze_meander.core.grid import Cell, Grid


class MeanderStrategy:
    """
    Decides whether a path carries on forward, turns left or turns right.
    Each valid direction scores the sum of the weights it qualifies for and
    the next move is a weighted random pick among them.
    """
    __slots__ = ('weight_north_south', 'weight_east_west', 'weight_forward',
                 'weight_turn_left', 'weight_turn_right', 'weight_same_cell_type')

    def __init__(self, weight_north_south: int = 1, weight_east_west: int = 1,
                 weight_forward: int = 1, weight_turn_left: int = 1,
                 weight_turn_right: int = 1, weight_same_cell_type: int = 1):
        self.weight_north_south = weight_north_south
        self.weight_east_west = weight_east_west
        self.weight_forward = weight_forward
        self.weight_turn_left = weight_turn_left
        self.weight_turn_right = weight_turn_right
        self.weight_same_cell_type = weight_same_cell_type

        for name in self.__slots__:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise MazeConfigError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise MazeConfigError(f"{name} must be non-negative, got {value}")

    def as_tuple(self) -> tuple:
        return tuple(getattr(self, name) for name in self.__slots__)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MeanderStrategy):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self) -> str:
        return "MeanderStrategy(%s)" % ", ".join(str(w) for w in self.as_tuple())

    def get_weight(self, grid: Grid, current: Cell, direction: Direction,
                   previous_direction: Direction) -> int:
        # Only called for valid moves, so the neighbor exists
        target = grid.adjacent(current, direction)

        weight = self.weight_north_south if direction.is_vertical() else self.weight_east_west
        if target.cell_type == current.cell_type:
            weight += self.weight_same_cell_type
        if direction is previous_direction:
            weight += self.weight_forward
        if direction is previous_direction.left():
            weight += self.weight_turn_left
        if direction is previous_direction.right():
            weight += self.weight_turn_right
        return weight

    def candidates(self, grid: Grid, current: Cell) -> Tuple[List[Direction], List[int]]:
        """Valid (direction, weight) pairs, starting a quarter turn right of the incoming direction."""
        previous_direction = grid.incoming_direction(current)
        if previous_direction is None:
            previous_direction = Direction.NORTH

        directions: List[Direction] = []
        weights: List[int] = []
        direction = previous_direction
        for _ in range(4):
            direction = direction.right()
            if grid.is_valid_move(current, direction):
                directions.append(direction)
                weights.append(self.get_weight(grid, current, direction, previous_direction))
        return directions, weights

    def choose(self, grid: Grid, current: Cell, sampler: Sampler) -> Optional[Direction]:
        """Next direction for a path at 'current', or None at a dead end."""
        directions, weights = self.candidates(grid, current)
        if not directions:
            return None
        return directions[sampler.choose(weights)]


def default_strategies() -> List[MeanderStrategy]:
    return [
        # Inside the circle, paths are generally long, straight east-west
        MeanderStrategy(1, 100, 1, 1, 1, 1),
        # Outside the circle, paths move more randomly
        MeanderStrategy(1, 1, 1, 1, 1, 1),
    ]


def validate_strategies(strategies: Sequence[MeanderStrategy]) -> List[MeanderStrategy]:
    strategies = list(strategies)
    # One entry per cell type
    if len(strategies) < 2:
        raise MazeConfigError(f"Need a strategy for each of the 2 cell types, got {len(strategies)}")
    for s in strategies:
        if not isinstance(s, MeanderStrategy):
            raise MazeConfigError(f"Expected MeanderStrategy, got {type(s).__name__}")
    return strategies
