"""
Structural edits driven by decoded pointer clicks.

All operations take a query point in the same coordinate space as point
positions, and none of them raise on bad input: a miss, a stale handle or a
rejected link leaves the simulation running and the world unchanged.
"""
import enum
import logging

from .Vec2 import Vec2
from .errors import RopeSimError

logger = logging.getLogger(__name__)


class Tool(enum.Enum):
    POINT = "point"
    LINK = "link"


class LinkState(enum.Enum):
    IDLE = "idle"
    AWAITING_FIRST_POINT = "awaiting_first_point"
    AWAITING_SECOND_POINT = "awaiting_second_point"


class TopologyEditor:
    def __init__(self, world):
        self.world = world
        self.tool = Tool.POINT
        self.link_state = LinkState.IDLE
        self.pending_start = None

    @property
    def points(self):
        return self.world.points

    @property
    def constraints(self):
        return self.world.constraints

    def select_tool(self, tool):
        self.tool = Tool(tool)
        self.pending_start = None
        if self.tool is Tool.LINK:
            self.link_state = LinkState.AWAITING_FIRST_POINT
        else:
            self.link_state = LinkState.IDLE

    def click(self, pos):
        """Route a click to whatever the active tool does with it."""
        if self.tool is Tool.POINT:
            self.place_or_toggle(pos)
        elif self.link_state is LinkState.AWAITING_SECOND_POINT:
            self.complete_link(pos)
        else:
            self.begin_link(pos)

    def place_or_toggle(self, pos):
        query = _query(pos)
        if query is None:
            return None
        handle = self.points.find_at_position(query)
        if handle is None:
            return self.points.add(query, locked=False)

        point = self.points.get(handle)
        if point.locked:
            self.delete_point(handle)
        else:
            self.points.set_locked(handle, True)
        return handle

    def delete_point(self, handle):
        # links go first so no constraint ever refers to a dead point
        self.constraints.remove_all_incident(handle)
        self.points.remove(handle)
        if self.pending_start == handle:
            self.pending_start = None
            if self.link_state is LinkState.AWAITING_SECOND_POINT:
                self.link_state = LinkState.AWAITING_FIRST_POINT

    def begin_link(self, pos):
        """
        Remember the point under pos as the start of a link. A hit made while
        the point tool is active switches to the link tool, so the link state
        never says a link is half made while the point tool is selected.
        """
        query = _query(pos)
        if query is None:
            return False
        handle = self.points.find_at_position(query)
        if handle is None:
            # a miss keeps whatever state we were in
            return False
        self.tool = Tool.LINK
        self.pending_start = handle
        self.link_state = LinkState.AWAITING_SECOND_POINT
        return True

    def complete_link(self, pos):
        """
        Link the pending start to the point under pos. Returns the new
        constraint, or None when nothing was created. Always leaves the link
        tool active and waiting for a first point.
        """
        start = self.pending_start
        self.tool = Tool.LINK
        self.pending_start = None
        self.link_state = LinkState.AWAITING_FIRST_POINT

        query = _query(pos)
        if start is None or query is None:
            return None
        end = self.points.find_at_position(query)
        if end is None:
            return None
        try:
            return self.constraints.add(start, end)
        except RopeSimError as exc:
            logger.debug("link %s-%s ignored: %s", start, end, exc)
            return None

    def clear_all(self):
        self.world.clear()
        self.pending_start = None
        if self.link_state is LinkState.AWAITING_SECOND_POINT:
            self.link_state = LinkState.AWAITING_FIRST_POINT

    def pending_position(self):
        """Position of the pending link start, for drawing a rubber band."""
        if self.pending_start is None or self.pending_start not in self.points:
            return None
        return self.points.get(self.pending_start).pos


def _query(pos):
    try:
        query = Vec2.of(pos)
    except (TypeError, ValueError, IndexError):
        logger.debug("ignoring malformed query point %r", pos)
        return None
    if not query.is_finite():
        logger.debug("ignoring non-finite query point %r", pos)
        return None
    return query
