"""Pygame drawing of bodies, trails and axes.

Nothing here mutates the simulation; the renderer only reads positions and
trail points from a :class:`~gravtrails.simulation.SimulationController`.
"""

import numpy as np
import pygame
import pygame.gfxdraw

from . import constants as C

# gfxdraw takes 16-bit coordinates
_COORD_LIMIT = 32000


def _drawable(screen_pts, visible):
    return visible & np.all(np.abs(screen_pts) < _COORD_LIMIT, axis=1)


def _runs(mask):
    """Yield ``(start, stop)`` slices of consecutive True values."""
    start = None
    for i, ok in enumerate(mask):
        if ok and start is None:
            start = i
        elif not ok and start is not None:
            yield start, i
            start = None
    if start is not None:
        yield start, len(mask)


def draw_polyline(screen, camera, points, color):
    """Draw a world-space polyline, skipping parts behind the camera."""
    if len(points) < 2:
        return
    screen_pts, _, visible = camera.world_to_screen(points)
    ok = _drawable(screen_pts, visible)
    for start, stop in _runs(ok):
        if stop - start > 1:
            pygame.draw.aalines(screen, color, False, screen_pts[start:stop].tolist())


def draw_axes(screen, camera, length=C.AXES_LENGTH):
    origin = np.zeros(3)
    for axis, color in zip(np.eye(3), C.AXIS_COLORS):
        draw_polyline(screen, camera, np.array([origin, axis * length]), color)


def draw_body(screen, camera, body, screen_pos, depth):
    color = body.color if body.color is not None else C.WHITE
    radius = min(camera.projected_radius(body.radius, depth), _COORD_LIMIT)
    x, y = int(screen_pos[0]), int(screen_pos[1])
    pygame.gfxdraw.filled_circle(screen, x, y, radius, color)
    pygame.gfxdraw.aacircle(screen, x, y, radius, color)


def draw_scene(screen, controller, camera, show_axes=True):
    """Render one frame of the simulation onto ``screen``."""
    screen.fill(C.BLACK)
    if show_axes:
        draw_axes(screen, camera)

    bodies = controller.bodies
    for body, trail_pts in zip(bodies, controller.trails()):
        color = body.color if body.color is not None else C.WHITE
        draw_polyline(screen, camera, trail_pts, color)

    if not bodies:
        return
    screen_pts, depth, visible = camera.world_to_screen(controller.positions())
    ok = _drawable(screen_pts, visible)
    # far to near so closer bodies overdraw
    for i in np.argsort(-depth):
        if ok[i]:
            draw_body(screen, camera, bodies[i], screen_pts[i], depth[i])
