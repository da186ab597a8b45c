"""Array based force accumulation and time stepping.

Positions and velocities are ``(n, 3)`` float64 arrays and masses an ``(n,)``
array. Nothing in here knows about :class:`~gravtrails.physics.Body`; the
object level wrappers live in :mod:`gravtrails.physics`.
"""

import numpy as np

from . import constants as C


def pairwise_force(pos_a, mass_a, pos_b, mass_b, g_constant=C.G):
    """Return the gravitational force exerted on ``a`` by ``b``.

    Coincident positions yield exactly the zero vector instead of an
    infinite force.
    """
    r_vec = np.asarray(pos_b, dtype=np.float64) - np.asarray(pos_a, dtype=np.float64)
    dist_sq = float(np.dot(r_vec, r_vec))
    if dist_sq == 0:
        return np.zeros(3, dtype=np.float64)

    force_mag = g_constant * mass_a * mass_b / dist_sq
    return r_vec / np.sqrt(dist_sq) * force_mag


def compute_forces(
    positions: np.ndarray,
    masses: np.ndarray,
    g_constant: float = C.G,
) -> np.ndarray:
    """Net gravitational force on every body from one snapshot of positions.

    Parameters
    ----------
    positions : ndarray, shape (n, 3)
        Body positions.
    masses : ndarray, shape (n,)
        Body masses.
    g_constant : float, optional
        Gravitational constant in scene units.

    Returns
    -------
    ndarray, shape (n, 3)
        Sum over ``j != i`` of the force exerted by ``j`` on ``i``.
    """
    positions = np.asarray(positions, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)
    n = len(masses)
    forces = np.zeros((n, 3), dtype=np.float64)

    # each pair once; Newton's third law gives the partner's share
    for i in range(n):
        for j in range(i + 1, n):
            f_ij = pairwise_force(
                positions[i], masses[i], positions[j], masses[j], g_constant
            )
            forces[i] += f_ij
            forces[j] -= f_ij

    return forces


def semi_implicit_euler_step_arrays(
    positions,
    velocities,
    masses,
    dt,
    g_constant=C.G,
) -> tuple[np.ndarray, np.ndarray]:
    """Advance the system by one semi-implicit (symplectic) Euler step.

    Velocities are kicked first and positions drift with the *new*
    velocities. The input arrays are left untouched.
    """
    positions = np.asarray(positions, dtype=np.float64)
    velocities = np.asarray(velocities, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64)

    if len(masses) == 0:
        return positions.copy(), velocities.copy()

    forces = compute_forces(positions, masses, g_constant)
    acc = forces / masses[:, np.newaxis]

    vel_new = velocities + acc * dt
    pos_new = positions + vel_new * dt

    return pos_new, vel_new
