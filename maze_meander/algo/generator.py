import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from maze_meander.algo.base import Generator
from maze_meander.algo.meander import MeanderStrategy, default_strategies, validate_strategies
from maze_meander.algo.sampling import Sampler
from maze_meander.core.errors import MazeConfigError, MazeInvariantError
from maze_meander.core.grid import Grid

logger = logging.getLogger(__name__)


class MeanderGenerator(Generator):
    """
    Grows a tree of directed edges from the start cell using several
    concurrent paths.

    Each pass over the frontier moves every path one step: forward along the
    direction its cell-type strategy picks, or back to its predecessor when
    the strategy finds no valid move. A path that backtracks onto the start
    cell with nowhere to go is retired, as is the path that first steps into
    the finish zone. Paths carry nothing but their current (x, y); the
    direction they arrived from is read back off the grid's edges.
    """

    def __init__(self, grid: Grid, strategies: Optional[Sequence[MeanderStrategy]] = None,
                 seed: Optional[int] = None, sampler: Optional[Sampler] = None,
                 branch_probability: float = 0.05):
        super().__init__(grid, seed=seed, sampler=sampler)
        if not 0.0 <= branch_probability <= 1.0:
            raise MazeConfigError(f"Branch probability must be within [0, 1], got {branch_probability}")

        self.strategies: List[MeanderStrategy] = validate_strategies(
            strategies if strategies is not None else default_strategies()
        )
        self.branch_probability = branch_probability
        self.paths: List[Tuple[int, int]] = []
        self.branch_count = 0
        self.backtrack_count = 0

    def step_limit(self) -> int:
        # Every path advances at most once per cell and backtracks at most as
        # far as it advanced plus the depth it was spawned at.
        n = self.grid.width * self.grid.height
        return 4 * n * (n + 1)

    def run(self) -> Iterator[str]:
        grid = self.grid
        sampler = self.sampler
        limit = self.step_limit()

        start = grid.start_cell
        start.mark_as_visited()
        self.paths = [start.pos]
        paths = self.paths

        while paths:
            # Paths spawned during this pass are stepped in this pass too
            index = 0
            while index < len(paths):
                current = grid.cell(*paths[index])
                strategy = self.strategies[current.cell_type]
                direction = strategy.choose(grid, current, sampler)

                if direction is not None:
                    if sampler.chance(self.branch_probability):
                        paths.append(current.pos)
                        self.branch_count += 1

                    target = grid.record_edge(current, direction)
                    if target.finish_area:
                        grid.mark_goal(target)
                        logger.debug("Goal reached at %s after %d steps", target.pos, self.step_count)
                        del paths[index]
                    else:
                        paths[index] = target.pos
                        index += 1
                elif current.pos == grid.start:
                    # Exhausted: nothing left to explore behind this path
                    del paths[index]
                else:
                    paths[index] = grid.predecessor(current).pos
                    self.backtrack_count += 1
                    index += 1

                self.step_count += 1
                if self.step_count > limit:
                    raise MazeInvariantError(f"Generation exceeded {limit} steps without finishing")
                if self.step_count % self.PROGRESS_EVERY == 0:
                    yield f"Meandering... Paths: {len(paths)}"

        logger.debug(
            "Generated %dx%d maze: %d steps, %d branches, %d backtracks, goal=%s",
            grid.width, grid.height, self.step_count, self.branch_count,
            self.backtrack_count, grid.finish,
        )
        yield "Done"


def generate(width: int, height: int, start_finish_size: int = 3,
             strategies: Optional[Sequence[MeanderStrategy]] = None,
             seed: Optional[int] = None, sampler: Optional[Sampler] = None,
             branch_probability: float = 0.05) -> Grid:
    """Builds a grid and runs a MeanderGenerator over it to completion."""
    grid = Grid(width, height, start_finish_size)
    return MeanderGenerator(
        grid, strategies=strategies, seed=seed, sampler=sampler,
        branch_probability=branch_probability,
    ).run_all()
