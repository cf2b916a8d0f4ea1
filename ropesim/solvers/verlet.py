from .solver import solver


class VerletIntegrator(solver):
    def __init__(self, gravity=0.0008, enabled=True):
        """
        Position Verlet integrator with a constant downward acceleration.

        :param gravity: acceleration along +y in px/ms^2.
        """
        super().__init__(enabled)
        self.gravity = float(gravity)

    def step(self, points, dt):
        """
        Advance every unlocked point by one time step.

        Velocity is inferred from the displacement since the previous step, so
        corrections made by the constraint solver carry over as momentum.
        Locked points are skipped; their prev_pos may go stale, which is
        harmless because nothing reads their kinematics.
        """
        drop = self.gravity * dt * dt
        for p in points:
            if p.locked:
                continue
            velocity = p.pos - p.prev_pos
            p.prev_pos = p.pos.clone()
            p.pos.add(velocity)
            p.pos.y += drop

    def solve(self, world, dt):
        if self.enabled:
            self.step(world.points, dt)
