from abc import ABC, abstractmethod
from typing import Iterator, Optional

from maze_meander.algo.sampling import RandomSampler, Sampler
from maze_meander.core.grid import Grid


class Generator(ABC):
    # Progress is reported every this many steps
    PROGRESS_EVERY = 100

    def __init__(self, grid: Grid, seed: Optional[int] = None, sampler: Optional[Sampler] = None):
        self.grid = grid
        self.seed = seed
        # An explicit sampler wins over the seed
        self.sampler = sampler if sampler is not None else RandomSampler(seed)
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings while mutating self.grid in place.
        The last value yielded is "Done".
        """

    def run_all(self) -> Grid:
        """Runs the generator to completion and returns the finished grid."""
        for _ in self.run():
            pass
        return self.grid
