"""Bodies and the object level physics API.

:class:`Body` keeps its state as 3-D numpy vectors. The heavy lifting is done
on arrays by :mod:`gravtrails.integrators`; the functions here gather body
state into arrays, call the array routines and write the results back.
"""
import math

import numpy as np

from . import constants as C
from .errors import InvalidConfiguration
from .integrators import compute_forces, pairwise_force, semi_implicit_euler_step_arrays
from .trail import Trail


def _as_vector(value, name):
    try:
        v = np.array(value, dtype=float).reshape(-1)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"{name} must be numeric, got {value!r}") from None
    if v.size > 3:
        raise InvalidConfiguration(f"{name} has {v.size} components, expected at most 3")
    if v.size < 3:
        v = np.pad(v, (0, 3 - v.size))
    if not np.all(np.isfinite(v)):
        raise InvalidConfiguration(f"{name} must be finite, got {v.tolist()}")
    return v


def validate_mass(mass):
    """Return ``mass`` as a float, raising if it is not finite and positive."""
    try:
        m = float(mass)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"mass must be a number, got {mass!r}") from None
    if not math.isfinite(m) or m <= 0:
        raise InvalidConfiguration(f"mass must be positive and finite, got {mass!r}")
    return m


class Body:
    """Point mass with render hints and its own trail."""

    def __init__(
        self,
        mass,
        pos,
        vel,
        radius=C.DEFAULT_BODY_RADIUS,
        color=None,
        trail_length=C.DEFAULT_TRAIL_LENGTH,
    ):
        """Create a body storing position and velocity as 3-D vectors.

        Parameters
        ----------
        mass : float
            Mass in scene units. Must be positive.
        pos : array-like
            Initial position. Values with fewer than three components are
            padded with zeros.
        vel : array-like
            Initial velocity, padded like ``pos``.
        radius : float, optional
            Display radius. Not used by the physics.
        color : tuple, optional
            RGB display color. Not used by the physics.
        trail_length : int, optional
            Maximum number of trail points, ``-1`` for unbounded.
        """
        self.mass = validate_mass(mass)
        self.pos = _as_vector(pos, "position")
        self.vel = _as_vector(vel, "velocity")
        self.radius = radius
        self.color = color
        self.trail = Trail(trail_length)

    def update_physics_state(self, new_pos, new_vel):
        """Replace position and velocity with copies of the given vectors."""
        self.pos = np.array(new_pos, dtype=float).reshape(3)
        self.vel = np.array(new_vel, dtype=float).reshape(3)

    def record_trail(self):
        self.trail.record(self.pos)

    def __repr__(self):
        return (
            f"Body(mass={self.mass}, pos={self.pos.tolist()}, "
            f"vel={self.vel.tolist()}, radius={self.radius}, color={self.color})"
        )


def force(a, b, g_constant=C.G):
    """Gravitational force exerted by body ``b`` on body ``a``."""
    return pairwise_force(a.pos, a.mass, b.pos, b.mass, g_constant)


def net_forces(bodies, g_constant=C.G):
    """Compute the net force on each body."""
    if not bodies:
        return []

    positions = np.array([b.pos for b in bodies], dtype=float)
    masses = np.array([b.mass for b in bodies], dtype=float)

    force_array = compute_forces(positions, masses, g_constant)
    return [force_array[i] for i in range(len(bodies))]


def integrate(bodies, dt, g_constant=C.G):
    """Advance bodies in place by one semi-implicit Euler step."""
    if not bodies:
        return

    positions = np.array([b.pos for b in bodies], dtype=float)
    velocities = np.array([b.vel for b in bodies], dtype=float)
    masses = np.array([b.mass for b in bodies], dtype=float)

    new_pos, new_vel = semi_implicit_euler_step_arrays(
        positions, velocities, masses, dt, g_constant
    )

    for b, p, v in zip(bodies, new_pos, new_vel):
        b.update_physics_state(p, v)
