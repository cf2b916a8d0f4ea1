from .Vec2 import Vec2


class MassPoint:
    """A simulated particle: position, previous position and a lock flag.

    Velocity is never stored; the integrator infers it from ``pos - prev_pos``.
    """

    def __init__(self, handle, pos, locked=False, radius=6.0):
        self.handle = handle
        self.pos = Vec2.of(pos)
        # zero initial velocity
        self.prev_pos = self.pos.clone()
        self.locked = bool(locked)
        self.radius = float(radius)

    def intersects(self, query):
        # hit region is twice the visual radius so small points stay easy to click
        diameter = 2.0 * self.radius
        return self.pos.distance_sq_to(query) <= diameter * diameter

    def move_to(self, pos):
        """Explicit edit (e.g. dragging). Resets prev_pos so no velocity is injected."""
        self.pos = Vec2.of(pos)
        self.prev_pos = self.pos.clone()

    def __repr__(self):
        return f"MassPoint(handle={self.handle}, pos=({self.pos.x:.2f}, {self.pos.y:.2f}), locked={self.locked})"

    def __str__(self):
        return self.__repr__()
