"""Bounded position history used to draw trails behind bodies."""

from collections import deque

import numpy as np

from . import constants as C
from .errors import InvalidArgument


def _validate_cap(cap):
    try:
        cap_int = int(cap)
    except (TypeError, ValueError):
        raise InvalidArgument(f"Trail cap must be an integer, got {cap!r}") from None
    if cap_int != cap or cap_int < C.UNBOUNDED_TRAIL:
        raise InvalidArgument(
            f"Trail cap must be {C.UNBOUNDED_TRAIL} (unbounded) or >= 0, got {cap!r}"
        )
    return cap_int


def record(points, position, cap=C.DEFAULT_TRAIL_LENGTH):
    """Append a copy of ``position`` to ``points`` and evict the oldest point.

    ``points`` is a :class:`collections.deque`. A ``cap`` of
    ``UNBOUNDED_TRAIL`` keeps every point.
    """
    cap = _validate_cap(cap)
    points.append(np.array(position, dtype=np.float64))
    if cap != C.UNBOUNDED_TRAIL and len(points) > cap:
        points.popleft()
    return points


class Trail:
    """FIFO history of one body's positions, oldest first."""

    def __init__(self, cap=C.DEFAULT_TRAIL_LENGTH):
        self.cap = _validate_cap(cap)
        self._points = deque()

    def record(self, position):
        record(self._points, position, self.cap)

    @property
    def points(self):
        """Copies of the recorded positions in insertion order."""
        return [p.copy() for p in self._points]

    def as_array(self) -> np.ndarray:
        """Return the trail as a ``(k, 3)`` array for polyline drawing."""
        if not self._points:
            return np.zeros((0, 3), dtype=np.float64)
        return np.array(self._points, dtype=np.float64)

    def __len__(self):
        return len(self._points)

    def __iter__(self):
        return iter(self.points)

    def __repr__(self):
        return f"Trail(cap={self.cap}, points={len(self._points)})"
