"""Read-only diagnostics for a set of bodies.

These never feed back into the integration; they exist for the on-screen
readout and for checking the integrator in tests.
"""
from collections import deque

import numpy as np

from . import constants as C


def system_energy(bodies, g_constant=C.G):
    """Return total kinetic, potential and combined energy."""
    kinetic = 0.0
    potential = 0.0
    for b in bodies:
        kinetic += 0.5 * b.mass * np.dot(b.vel, b.vel)
    for i, bi in enumerate(bodies):
        for bj in bodies[i + 1:]:
            r = np.linalg.norm(bj.pos - bi.pos)
            if r == 0:
                continue
            potential -= g_constant * bi.mass * bj.mass / r
    return kinetic, potential, kinetic + potential


def total_momentum(bodies):
    p = np.zeros(3, dtype=float)
    for b in bodies:
        p += b.mass * b.vel
    return p


def center_of_mass(bodies):
    """Return the centre-of-mass position and velocity, or ``(None, None)``."""
    if not bodies:
        return None, None
    masses = np.array([b.mass for b in bodies], dtype=float)
    positions = np.array([b.pos for b in bodies], dtype=float)
    velocities = np.array([b.vel for b in bodies], dtype=float)
    total_mass = masses.sum()
    com_pos = (positions * masses[:, np.newaxis]).sum(axis=0) / total_mass
    com_vel = (velocities * masses[:, np.newaxis]).sum(axis=0) / total_mass
    return com_pos, com_vel


class DriftMonitor:
    """Watch conserved quantities drift away from their values at a reset.

    Each :meth:`sample` stores ``(simulation_time, energy_drift,
    momentum_drift)`` where the energy drift is relative, in percent, and the
    momentum drift is the norm of the change in total momentum.
    """

    def __init__(self, max_points=C.ENERGY_HISTORY_LENGTH, g_constant=C.G):
        self.samples = deque(maxlen=max_points)
        self.g_constant = g_constant
        self._energy0 = None
        self._momentum0 = None

    def start(self, bodies):
        """Take the reference values from ``bodies`` and forget old samples."""
        self.samples.clear()
        self._energy0 = system_energy(bodies, self.g_constant)[2] if bodies else None
        self._momentum0 = total_momentum(bodies)

    def sample(self, bodies, simulation_time=0.0):
        if self._energy0 is None:
            return None
        energy = system_energy(bodies, self.g_constant)[2]
        if self._energy0 == 0:
            energy_drift = 0.0 if energy == 0 else float("inf")
        else:
            energy_drift = (energy - self._energy0) / abs(self._energy0) * 100
        momentum_drift = float(np.linalg.norm(total_momentum(bodies) - self._momentum0))
        entry = (simulation_time, energy_drift, momentum_drift)
        self.samples.append(entry)
        return entry

    @property
    def energy_drift(self):
        return self.samples[-1][1] if self.samples else None

    @property
    def momentum_drift(self):
        return self.samples[-1][2] if self.samples else None
