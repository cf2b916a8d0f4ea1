import numpy as np

from .solver import solver


class RelaxationSolver(solver):
    def __init__(self, passes=500, rng=None, seed=None, enabled=True):
        """
        Iterative constraint relaxation in a fresh random order every sweep.

        Each projection is applied immediately (Gauss-Seidel), so the order
        matters; shuffling every sweep keeps the first constraints from being
        favoured.

        :param passes: sweeps per step.
        :param rng: a numpy Generator to draw permutations from.
        :param seed: used to build a Generator when rng is not given.
        """
        super().__init__(enabled)
        self.passes = int(passes)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def relax(self, constraints, points, passes=None):
        passes = self.passes if passes is None else int(passes)
        constraints = list(constraints)
        n = len(constraints)
        if n == 0 or passes <= 0:
            return

        # endpoints are resolved once; no structural edit can happen mid-step
        resolved = [(c, points.get(c.a), points.get(c.b)) for c in constraints]
        for _ in range(passes):
            for i in self.rng.permutation(n):
                c, pa, pb = resolved[i]
                c.project(pa, pb)

    def solve(self, world, dt):
        if self.enabled:
            self.relax(world.constraints, world.points)
