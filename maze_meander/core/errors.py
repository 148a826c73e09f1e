class MazeConfigError(ValueError):
    """Raised for invalid maze configuration, before any generation step."""


class MazeInvariantError(RuntimeError):
    """
    Raised when the maze structure is in a state generation never produces
    (a cell with no incoming edge asked for its predecessor, an edge drawn off
    the grid, ...). Not recoverable: the grid should be discarded.
    """
