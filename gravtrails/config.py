"""Body configuration records and random scene generation.

A configuration record describes how to (re)create one body::

    {
        "mass": 10000,
        "position": {"x": 100, "y": 0, "z": 0},
        "velocity": {"x": 0, "y": 0, "z": -14},
        "radius": 5,          # optional, display only
        "color": [255, 0, 0], # optional, display only
    }

``position`` and ``velocity`` may also be given as plain sequences.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from . import constants as C
from .errors import InvalidConfiguration
from .physics import Body, validate_mass

Vector = Tuple[float, float, float]


def _coerce_vector(value, name) -> Vector:
    if isinstance(value, Mapping):
        value = (value.get("x", 0.0), value.get("y", 0.0), value.get("z", 0.0))
    try:
        components = [float(c) for c in value]
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"{name} must be a vector, got {value!r}") from None
    if len(components) > 3:
        raise InvalidConfiguration(f"{name} has {len(components)} components, expected 3")
    components += [0.0] * (3 - len(components))
    if not all(np.isfinite(components)):
        raise InvalidConfiguration(f"{name} must be finite, got {components}")
    return tuple(components)


def _coerce_color(value):
    if value is None:
        return None
    try:
        r, g, b = (int(c) for c in value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"color must be an RGB triple, got {value!r}") from None
    return (r, g, b)


@dataclass(frozen=True)
class BodyConfig:
    """Initial state and render hints for one body."""

    mass: float
    position: Vector
    velocity: Vector
    radius: float = C.DEFAULT_BODY_RADIUS
    color: Optional[Tuple[int, int, int]] = None

    def __post_init__(self):
        object.__setattr__(self, "mass", validate_mass(self.mass))
        object.__setattr__(self, "position", _coerce_vector(self.position, "position"))
        object.__setattr__(self, "velocity", _coerce_vector(self.velocity, "velocity"))
        object.__setattr__(self, "color", _coerce_color(self.color))

    @classmethod
    def from_dict(cls, data):
        """Build a config from a plain mapping."""
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise InvalidConfiguration(f"body config must be a mapping, got {data!r}")
        missing = [k for k in ("mass", "position", "velocity") if k not in data]
        if missing:
            raise InvalidConfiguration(f"body config missing {', '.join(missing)}")
        return cls(
            mass=data["mass"],
            position=data["position"],
            velocity=data["velocity"],
            radius=data.get("radius", C.DEFAULT_BODY_RADIUS),
            color=data.get("color"),
        )

    def to_dict(self):
        x, y, z = self.position
        vx, vy, vz = self.velocity
        return {
            "mass": self.mass,
            "position": {"x": x, "y": y, "z": z},
            "velocity": {"x": vx, "y": vy, "z": vz},
            "radius": self.radius,
            "color": self.color,
        }

    def create_body(self, trail_length=C.DEFAULT_TRAIL_LENGTH, color=None) -> Body:
        """Instantiate a fresh :class:`Body` at this config's initial state."""
        return Body(
            self.mass,
            self.position,
            self.velocity,
            radius=self.radius,
            color=self.color if self.color is not None else color,
            trail_length=trail_length,
        )


def load_configs(records):
    """Validate a sequence of mappings (or configs) into ``BodyConfig``s."""
    return [BodyConfig.from_dict(r) for r in records]


def random_color(rng):
    return tuple(int(c) for c in rng.integers(0, 256, size=3))


def random_config(rng) -> BodyConfig:
    """Draw one random body configuration from ``rng``."""
    radius = float(rng.uniform(*C.RANDOM_RADIUS_RANGE))
    color = random_color(rng)
    position = rng.integers(0, C.RANDOM_POSITION_EXTENT, size=3).astype(float)
    velocity = rng.uniform(-C.RANDOM_MAX_SPEED, C.RANDOM_MAX_SPEED, size=3)
    mass = float(rng.uniform(*C.RANDOM_MASS_RANGE))
    return BodyConfig(mass, tuple(position), tuple(velocity), radius=radius, color=color)


def random_configs(n, rng=None):
    """Generate ``n`` random configurations.

    Parameters
    ----------
    n : int
        Number of configurations.
    rng : numpy.random.Generator, optional
        Source of randomness. A fresh unseeded generator is used when omitted.
    """
    if rng is None:
        rng = np.random.default_rng()
    return [random_config(rng) for _ in range(n)]
