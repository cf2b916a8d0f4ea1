import pygame

LOCKED_COLOR = (230, 55, 46)
FREE_COLOR = (73, 178, 235)
LINK_COLOR = (40, 40, 40)
PENDING_COLOR = (250, 204, 21)


def draw_constraints(screen, world, color=LINK_COLOR, width=2):
    """Helper to draw every link as a straight segment."""
    for a, b in world.segments():
        pygame.draw.line(screen, color, (int(a.x), int(a.y)), (int(b.x), int(b.y)), width)


def draw_points(screen, world, hovered=None):
    """Helper to draw all points; locked ones in red."""
    for p in world.points:
        color = LOCKED_COLOR if p.locked else FREE_COLOR
        center = (int(p.pos.x), int(p.pos.y))
        pygame.draw.circle(screen, color, center, int(p.radius))
        if hovered is not None and p.handle == hovered:
            # outline shows the (doubled) click radius
            pygame.draw.circle(screen, PENDING_COLOR, center, int(p.radius * 2), 1)


def draw_pending_link(screen, editor, cursor, color=PENDING_COLOR):
    """Rubber band from the first endpoint of a half-made link to the cursor."""
    start = editor.pending_position()
    if start is None or cursor is None:
        return
    pygame.draw.line(screen, color, (int(start.x), int(start.y)), (int(cursor[0]), int(cursor[1])), 1)


def draw_world(screen, world, editor=None, cursor=None, background=(255, 255, 255)):
    screen.fill(background)
    draw_constraints(screen, world)
    hovered = world.points.find_at_position(cursor) if cursor is not None else None
    draw_points(screen, world, hovered=hovered)
    if editor is not None:
        draw_pending_link(screen, editor, cursor)
