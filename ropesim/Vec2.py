import math


class Vec2:
    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def of(cls, value):
        """Accept a Vec2 or any (x, y) pair and return a fresh Vec2."""
        if isinstance(value, Vec2):
            return value.clone()
        return cls(value[0], value[1])

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    # in-place variants, used on the hot path of the solvers
    def add(self, other):
        self.x += other.x
        self.y += other.y
        return self

    def subtract(self, other):
        self.x -= other.x
        self.y -= other.y
        return self

    def scale(self, multiplier):
        self.x *= multiplier
        self.y *= multiplier
        return self

    def length(self):
        return math.hypot(self.x, self.y)

    def length_sq(self):
        return self.x * self.x + self.y * self.y

    def distance_to(self, other):
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_sq_to(self, other):
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def normalize(self, fallback=(1.0, 0.0)):
        l = self.length()
        if l > 0.0:
            return Vec2(self.x / l, self.y / l)
        # zero vector has no direction; hand back a fixed unit vector instead of NaN
        return Vec2(fallback[0], fallback[1])

    def midpoint(self, other):
        return Vec2((self.x + other.x) * 0.5, (self.y + other.y) * 0.5)

    def is_finite(self):
        return math.isfinite(self.x) and math.isfinite(self.y)

    def clone(self):
        return Vec2(self.x, self.y)

    def as_tuple(self):
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    # mutable, so not hashable
    __hash__ = None

    def __repr__(self):
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
