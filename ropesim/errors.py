class RopeSimError(Exception):
    """Base class for errors raised by the simulation core."""


class StaleHandle(RopeSimError, KeyError):
    """A point or constraint handle that is no longer present in its store."""

    def __init__(self, kind, handle):
        super().__init__(f"no {kind} with handle {handle!r}")
        self.kind = kind
        self.handle = handle

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class DuplicateConstraint(RopeSimError):
    """The two points are already linked."""

    def __init__(self, a, b):
        super().__init__(f"points {a!r} and {b!r} are already linked")
        self.a = a
        self.b = b


class DegenerateConstraint(RopeSimError):
    """A link from a point to itself."""

    def __init__(self, handle):
        super().__init__(f"cannot link point {handle!r} to itself")
        self.handle = handle


class PresetError(RopeSimError):
    """Unknown preset name or malformed save file."""
