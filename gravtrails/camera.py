import math

import numpy as np

from . import constants as C

_WORLD_UP = np.array([0.0, 1.0, 0.0])
_MAX_PITCH = math.pi / 2 - 0.01


class Camera:
    """Orbit camera projecting world positions onto the screen.

    The eye sits on a sphere around ``target`` described by ``yaw``,
    ``pitch`` and ``distance``; ``fov`` is the vertical field of view in
    degrees.
    """

    def __init__(
        self,
        width=C.WIDTH - C.UI_SIDEBAR_WIDTH,
        height=C.HEIGHT,
        fov=C.FIELD_OF_VIEW,
        position=C.CAMERA_POSITION,
        target=C.CAMERA_TARGET,
    ):
        self.width = int(width)
        self.height = int(height)
        self.fov = float(fov)
        self._initial_position = np.array(position, dtype=float)
        self._initial_target = np.array(target, dtype=float)
        self.reset()

    def reset(self):
        """Return to the initial eye position and target."""
        self.target = self._initial_target.copy()
        offset = self._initial_position - self.target
        self.distance = float(np.linalg.norm(offset))
        self.pitch = math.asin(offset[1] / self.distance)
        self.yaw = math.atan2(offset[0], offset[2])

    @property
    def position(self):
        cp = math.cos(self.pitch)
        offset = np.array(
            [cp * math.sin(self.yaw), math.sin(self.pitch), cp * math.cos(self.yaw)]
        )
        return self.target + offset * self.distance

    @property
    def focal_length(self):
        return (self.height / 2) / math.tan(math.radians(self.fov) / 2)

    def orbit(self, dx, dy):
        """Rotate around the target by a mouse drag of ``(dx, dy)`` pixels."""
        self.yaw -= dx * C.CAMERA_ORBIT_SPEED
        self.pitch += dy * C.CAMERA_ORBIT_SPEED
        self.pitch = max(-_MAX_PITCH, min(self.pitch, _MAX_PITCH))

    def zoom_by(self, factor):
        """Scale the eye distance; ``factor < 1`` moves closer."""
        self.distance = max(
            C.MIN_CAMERA_DISTANCE,
            min(self.distance * factor, C.MAX_CAMERA_DISTANCE),
        )

    def _basis(self):
        eye = self.position
        forward = self.target - eye
        forward /= np.linalg.norm(forward)
        right = np.cross(forward, _WORLD_UP)
        right /= np.linalg.norm(right)
        up = np.cross(right, forward)
        return eye, right, up, forward

    def world_to_screen(self, points):
        """Project world points to screen pixels.

        Parameters
        ----------
        points : array-like, shape (n, 3) or (3,)
            World positions.

        Returns
        -------
        screen : ndarray, shape (n, 2)
            Pixel coordinates; meaningless where ``visible`` is False.
        depth : ndarray, shape (n,)
            Distance along the view direction.
        visible : ndarray of bool, shape (n,)
            True for points in front of the near plane.
        """
        pts = np.asarray(points, dtype=float).reshape(-1, 3)
        eye, right, up, forward = self._basis()
        rel = pts - eye
        x_cam = rel @ right
        y_cam = rel @ up
        depth = rel @ forward

        visible = depth > C.NEAR_PLANE
        safe_depth = np.where(visible, depth, 1.0)
        f = self.focal_length
        screen = np.empty((len(pts), 2), dtype=float)
        screen[:, 0] = self.width / 2 + x_cam * f / safe_depth
        screen[:, 1] = self.height / 2 - y_cam * f / safe_depth
        return screen, depth, visible

    def projected_radius(self, radius, depth):
        """On-screen radius in pixels of a sphere at ``depth``."""
        if depth <= C.NEAR_PLANE:
            return 0
        return max(1, int(radius * self.focal_length / depth))
