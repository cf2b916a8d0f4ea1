import itertools
import logging

from .MassPoint import MassPoint
from .Vec2 import Vec2
from .errors import StaleHandle

logger = logging.getLogger(__name__)


class PointStore:
    """Owns every MassPoint. Points are addressed by an opaque integer handle.

    Iteration follows insertion order, which is also the tie-break order for
    hit testing.
    """

    def __init__(self, point_radius=6.0):
        self.point_radius = float(point_radius)
        self._points = {}
        self._handles = itertools.count(1)

    def add(self, pos, locked=False):
        handle = next(self._handles)
        self._points[handle] = MassPoint(handle, pos, locked=locked, radius=self.point_radius)
        logger.debug("added point %d at %s (locked=%s)", handle, self._points[handle].pos, locked)
        return handle

    def remove(self, handle):
        try:
            del self._points[handle]
        except KeyError:
            raise StaleHandle("point", handle) from None
        logger.debug("removed point %d", handle)

    def get(self, handle):
        try:
            return self._points[handle]
        except KeyError:
            raise StaleHandle("point", handle) from None

    def find_at_position(self, pos):
        query = Vec2.of(pos)
        for handle, point in self._points.items():
            if point.intersects(query):
                return handle
        return None

    def set_locked(self, handle, value):
        self.get(handle).locked = bool(value)

    def handles(self):
        return list(self._points)

    def clear(self):
        self._points.clear()

    def __contains__(self, handle):
        return handle in self._points

    def __iter__(self):
        return iter(self._points.values())

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return f"<{self.__class__.__name__} points={len(self._points)}>"
