import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from maze_meander.core.errors import MazeInvariantError


class Sampler(ABC):
    """
    Source of every random decision made during generation. Swapping in a
    deterministic subclass makes a run fully reproducible.
    """

    @abstractmethod
    def choose(self, weights: Sequence[float]) -> int:
        """
        Returns an index into 'weights', drawn proportionally to the weights.
        If every weight is zero the draw is uniform over all indices.
        """

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        if probability <= 0.0:
            return False
        if probability >= 1.0:
            return True
        return self.choose([1.0 - probability, probability]) == 1


class RandomSampler(Sampler):
    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def choose(self, weights: Sequence[float]) -> int:
        if not weights:
            raise MazeInvariantError("Weighted choice over an empty candidate list")
        total = sum(weights)
        if total <= 0:
            return self.rng.randrange(len(weights))
        return self.rng.choices(range(len(weights)), weights=weights)[0]

    def chance(self, probability: float) -> bool:
        return self.rng.random() < probability
