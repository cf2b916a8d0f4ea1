import itertools
import logging

from .DistanceConstraint import DistanceConstraint
from .errors import DegenerateConstraint, DuplicateConstraint, StaleHandle

logger = logging.getLogger(__name__)


class ConstraintStore:
    """Distance constraints over pairs of points in a PointStore.

    Constraints only refer to points by handle; the PointStore owns them.
    """

    def __init__(self, points):
        self.points = points
        self._constraints = {}
        self._handles = itertools.count(1)

    def add(self, a, b):
        pa = self.points.get(a)
        pb = self.points.get(b)
        if a == b:
            raise DegenerateConstraint(a)
        if self.find(a, b) is not None:
            raise DuplicateConstraint(a, b)
        handle = next(self._handles)
        c = DistanceConstraint(handle, a, b, pa.pos.distance_to(pb.pos))
        self._constraints[handle] = c
        logger.debug("linked %d-%d (rest length %.3f)", a, b, c.rest_length)
        return c

    def remove(self, handle):
        try:
            del self._constraints[handle]
        except KeyError:
            raise StaleHandle("constraint", handle) from None

    def remove_all_incident(self, point_handle):
        """Drop every constraint touching the point. Call before removing the point itself."""
        doomed = [h for h, c in self._constraints.items() if c.involves(point_handle)]
        for h in doomed:
            del self._constraints[h]
        if doomed:
            logger.debug("cascaded %d constraint(s) from point %d", len(doomed), point_handle)
        return len(doomed)

    def get(self, handle):
        try:
            return self._constraints[handle]
        except KeyError:
            raise StaleHandle("constraint", handle) from None

    def find(self, a, b):
        for c in self._constraints.values():
            if c.connects(a, b):
                return c
        return None

    def incident(self, point_handle):
        return [c for c in self._constraints.values() if c.involves(point_handle)]

    def all(self):
        return list(self._constraints.values())

    def clear(self):
        self._constraints.clear()

    def __iter__(self):
        return iter(self._constraints.values())

    def __len__(self):
        return len(self._constraints)

    def __repr__(self):
        return f"<{self.__class__.__name__} constraints={len(self._constraints)}>"
