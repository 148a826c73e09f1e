from enum import Enum


class Direction(Enum):
    # Order matters: right() steps forward through this sequence
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def right(self) -> "Direction":
        return _ROTATION[(self.value + 1) % 4]

    def left(self) -> "Direction":
        return _ROTATION[(self.value + 3) % 4]

    def opposite(self) -> "Direction":
        return _ROTATION[(self.value + 2) % 4]

    @property
    def dx(self) -> int:
        return DX[self]

    @property
    def dy(self) -> int:
        return DY[self]

    def is_vertical(self) -> bool:
        return self is Direction.NORTH or self is Direction.SOUTH

    def __str__(self) -> str:
        return self.name.capitalize()


_ROTATION = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

# Origin is the lower-left cell, so North moves up in y
DX = {Direction.NORTH: 0, Direction.SOUTH: 0, Direction.EAST: 1, Direction.WEST: -1}
DY = {Direction.NORTH: 1, Direction.SOUTH: -1, Direction.EAST: 0, Direction.WEST: 0}
