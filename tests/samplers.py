import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_meander.algo.sampling import Sampler


class HeaviestSampler(Sampler):
    """Always picks the first of the largest weights and never branches."""

    def __init__(self):
        self.calls = []

    def choose(self, weights):
        self.calls.append(list(weights))
        return max(range(len(weights)), key=lambda i: (weights[i], -i))

    def chance(self, probability):
        return False


class ScriptedSampler(Sampler):
    """Replays a fixed sequence of indices, wrapping around when exhausted."""

    def __init__(self, script, branch=False):
        self.script = list(script)
        self.position = 0
        self.branch = branch

    def choose(self, weights):
        index = self.script[self.position % len(self.script)] % len(weights)
        self.position += 1
        return index

    def chance(self, probability):
        return self.branch and probability > 0


class BranchingSampler(HeaviestSampler):
    """
    Heaviest choice, branching only on the numbered chance() calls in
    'branch_on'. With 'generator' set, snapshots its frontier before every
    choice.
    """

    def __init__(self, branch_on=(0,)):
        super().__init__()
        self.branch_on = set(branch_on)
        self.chances = 0
        self.generator = None
        self.snapshots = []

    def choose(self, weights):
        if self.generator is not None:
            self.snapshots.append(list(self.generator.paths))
        return super().choose(weights)

    def chance(self, probability):
        branch = self.chances in self.branch_on
        self.chances += 1
        return branch
