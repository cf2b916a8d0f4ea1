import logging
import math
import time

from .ConstraintStore import ConstraintStore
from .PointStore import PointStore
from .config import SimulationConfig
from .solvers import RelaxationSolver, VerletIntegrator

logger = logging.getLogger(__name__)


def now_ms():
    return time.monotonic() * 1000.0


class World:
    """Everything one simulation needs: both stores, the solvers, the clock and the run flag.

    Nothing here is module-global, so several worlds can run side by side and
    tests can build a seeded one.
    """

    def __init__(self, config=None, rng=None, clock=now_ms):
        self.config = config if config is not None else SimulationConfig()
        self.clock = clock

        self.points = PointStore(point_radius=self.config.point_radius)
        self.constraints = ConstraintStore(self.points)

        self.integrator = VerletIntegrator(gravity=self.config.gravity)
        self.relaxation = RelaxationSolver(passes=self.config.relaxation_passes, rng=rng, seed=self.config.seed)
        # run in this order every step
        self.solvers = [self.integrator, self.relaxation]

        self.running = False
        self.dt = 0.0
        self.previous_timestamp = self.clock()

    # --- clock / run state ---

    def reset_clock(self):
        self.previous_timestamp = self.clock()
        self.dt = 0.0

    def pause(self):
        self.running = False

    def resume(self):
        if not self.running:
            # don't let the paused interval land in the first dt
            self.reset_clock()
        self.running = True

    def toggle_pause(self):
        if self.running:
            self.pause()
        else:
            self.resume()
        return self.running

    def tick(self, now=None):
        """
        Called once per display refresh. Measures the elapsed time, clamps it
        to ``config.max_dt`` and steps if the simulation is running.
        Returns the dt that was used.
        """
        now = self.clock() if now is None else float(now)
        if not math.isfinite(now):
            # keep the last good timestamp
            logger.warning("ignoring non-finite clock reading %r", now)
            self.dt = 0.0
            return self.dt
        self.dt = min(max(now - self.previous_timestamp, 0.0), self.config.max_dt)
        self.previous_timestamp = now
        if self.running:
            self.step(self.dt)
        return self.dt

    def step(self, dt):
        """One integration + relaxation cycle. dt in milliseconds."""
        dt = float(dt)
        for s in self.solvers:
            s.solve(self, dt)

    # --- tunables ---

    def set_gravity(self, gravity):
        self.config.gravity = float(gravity)
        self.integrator.gravity = self.config.gravity

    def set_relaxation_passes(self, passes):
        self.config.relaxation_passes = max(0, int(passes))
        self.relaxation.passes = self.config.relaxation_passes

    # --- structure ---

    def clear(self):
        self.constraints.clear()
        self.points.clear()
        logger.info("world cleared")

    def segments(self):
        """(pos_a, pos_b) for every constraint, for drawing."""
        for c in self.constraints:
            yield self.points.get(c.a).pos, self.points.get(c.b).pos

    def is_finite(self):
        return all(p.pos.is_finite() and p.prev_pos.is_finite() for p in self.points)

    def __repr__(self):
        return f"<World points={len(self.points)} constraints={len(self.constraints)} running={self.running}>"
