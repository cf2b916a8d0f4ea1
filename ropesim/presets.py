"""
Built-in starting layouts.

A preset only ever talks to the stores through ``points.add`` and
``constraints.add``, the same way a user building the graph by hand would.
"""
import logging

from .Vec2 import Vec2
from .errors import PresetError

logger = logging.getLogger(__name__)


def build_rope(world, start=(400, 80), segments=15, spacing=20.0, pin_start=True):
    """
    Horizontal chain of points, optionally pinned at the first one.

    :return: list of point handles in chain order.
    """
    start = Vec2.of(start)
    handles = []
    for i in range(segments + 1):
        pos = Vec2(start.x + i * spacing, start.y)
        handles.append(world.points.add(pos, locked=(pin_start and i == 0)))
    for a, b in zip(handles, handles[1:]):
        world.constraints.add(a, b)
    return handles


def build_cloth(world, top_left=(250, 60), width=400, height=200, segments_x=8, segments_y=4,
                pin_corners=('top_left', 'top_right'), shear=False):
    """
    Creates a cloth grid.

    :param top_left: position of the top-left corner.
    :param width: Total width of the cloth in pixels.
    :param height: Total height of the cloth in pixels.
    :param segments_x: Number of horizontal segments.
    :param segments_y: Number of vertical segments.
    :param pin_corners: Corners to lock, any of 'top_left', 'top_right',
        'bottom_left', 'bottom_right', or 'top_row'.
    :param shear: Also add diagonal links, which makes the cloth resist shearing.
    :return: grid of handles, indexed [row][column].
    """
    cols = segments_x + 1
    top_left = Vec2.of(top_left)
    rows = segments_y + 1
    dx = width / segments_x
    dy = height / segments_y
    pin_corners = set(pin_corners or ())

    pinned = set()
    if 'top_left' in pin_corners:
        pinned.add((0, 0))
    if 'top_right' in pin_corners:
        pinned.add((0, cols - 1))
    if 'bottom_left' in pin_corners:
        pinned.add((rows - 1, 0))
    if 'bottom_right' in pin_corners:
        pinned.add((rows - 1, cols - 1))
    if 'top_row' in pin_corners:
        pinned.update((0, c) for c in range(cols))

    grid = []
    for r in range(rows):
        row = []
        for c in range(cols):
            pos = Vec2(top_left.x + c * dx, top_left.y + r * dy)
            row.append(world.points.add(pos, locked=(r, c) in pinned))
        grid.append(row)

    def get(r, c):
        if 0 <= r < rows and 0 <= c < cols:
            return grid[r][c]
        return None

    neighbours = [(0, 1), (1, 0)]
    if shear:
        neighbours += [(1, 1), (1, -1)]
    for r in range(rows):
        for c in range(cols):
            for dr, dc in neighbours:
                other = get(r + dr, c + dc)
                if other is not None:
                    world.constraints.add(grid[r][c], other)
    return grid


def build_pendulum(world, pivot=(400, 100), length=200.0, bobs=2):
    """Locked pivot with a chain of bobs hanging off at an angle."""
    pivot = Vec2.of(pivot)
    handles = [world.points.add(pivot, locked=True)]
    step = length / bobs
    for i in range(1, bobs + 1):
        handles.append(world.points.add(Vec2(pivot.x + i * step, pivot.y + i * step * 0.25)))
    for a, b in zip(handles, handles[1:]):
        world.constraints.add(a, b)
    return handles


def build_bridge(world, left=(150, 300), span=500.0, segments=20):
    """Chain locked at both ends, sagging under gravity once running."""
    handles = build_rope(world, start=left, segments=segments, spacing=span / segments, pin_start=True)
    world.points.set_locked(handles[-1], True)
    return handles


PRESETS = {
    'rope': build_rope,
    'cloth': build_cloth,
    'pendulum': build_pendulum,
    'bridge': build_bridge,
}


def load_preset(world, name, clear=True):
    try:
        builder = PRESETS[name]
    except KeyError:
        raise PresetError(f"unknown preset {name!r}; choose from {sorted(PRESETS)}") from None
    if clear:
        world.clear()
    result = builder(world)
    logger.info("loaded preset %r: %d points, %d constraints", name, len(world.points), len(world.constraints))
    return result
