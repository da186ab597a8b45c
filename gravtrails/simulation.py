import logging
import math
from dataclasses import replace

import numpy as np

from . import constants as C
from .config import load_configs, random_color, random_configs
from .errors import InvalidArgument
from .physics import integrate
from .presets import DEFAULT_SCENE

logger = logging.getLogger(__name__)


class SimulationController:
    """Owns the bodies of one simulation and advances them frame by frame.

    The host (a render loop, a test) calls :meth:`tick` once per frame with
    the real time elapsed since the previous frame. Setters only change
    fields; their effect shows up on the next tick, reset or randomize.
    """

    def __init__(
        self,
        configs=None,
        time_rate: float = C.DEFAULT_TIME_RATE,
        body_count: int = C.DEFAULT_BODY_COUNT,
        trail_length: int = C.DEFAULT_TRAIL_LENGTH,
        g_constant: float = C.G,
        rng=None,
    ):
        self.bodies = []
        self.g_constant = g_constant
        self.rng = rng if rng is not None else np.random.default_rng()
        self.configs = self._load_configs(DEFAULT_SCENE if configs is None else configs)
        self.simulation_time = 0.0
        self.paused = False

        self.time_rate = C.DEFAULT_TIME_RATE
        self.body_count = C.DEFAULT_BODY_COUNT
        self.trail_length = C.DEFAULT_TRAIL_LENGTH
        self.set_time_rate(time_rate)
        self.set_body_count(body_count)
        self.set_trail_length(trail_length)

        self.reset()

    # ------------------------------------------------------------------
    def set_time_rate(self, value) -> None:
        """Set the multiplier applied to real elapsed time."""
        try:
            rate = float(value)
        except (TypeError, ValueError):
            raise InvalidArgument(f"time rate must be a number, got {value!r}") from None
        if not math.isfinite(rate) or rate < 0:
            raise InvalidArgument(f"time rate must be finite and >= 0, got {value!r}")
        self.time_rate = rate
        logger.debug("time rate set to %s", rate)

    def set_body_count(self, value) -> None:
        """Set how many bodies the next :meth:`randomize` generates."""
        if isinstance(value, bool):
            raise InvalidArgument(f"body count must be an integer, got {value!r}")
        try:
            count = int(value)
        except (TypeError, ValueError):
            raise InvalidArgument(f"body count must be an integer, got {value!r}") from None
        if count != value or count < 0:
            raise InvalidArgument(f"body count must be an integer >= 0, got {value!r}")
        self.body_count = count
        logger.debug("body count set to %d", count)

    def set_trail_length(self, value) -> None:
        """Set the trail cap used for bodies created by the next reset."""
        try:
            length = int(value)
        except (TypeError, ValueError):
            raise InvalidArgument(f"trail length must be an integer, got {value!r}") from None
        if length != value or length < C.UNBOUNDED_TRAIL:
            raise InvalidArgument(
                f"trail length must be {C.UNBOUNDED_TRAIL} or >= 0, got {value!r}"
            )
        self.trail_length = length
        logger.debug("trail length set to %d", length)

    def set_configs(self, configs) -> None:
        """Replace the configuration list and rebuild the bodies from it."""
        self.configs = self._load_configs(configs)
        self.reset()

    def _load_configs(self, records):
        # colors are fixed per config so resets never consume the rng
        return [
            cfg if cfg.color is not None else replace(cfg, color=random_color(self.rng))
            for cfg in load_configs(records)
        ]

    # ------------------------------------------------------------------
    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Discard all bodies and trails and rebuild them from the configs."""
        self.bodies = [cfg.create_body(self.trail_length) for cfg in self.configs]
        self.simulation_time = 0.0
        logger.info("simulation reset with %d bodies", len(self.bodies))

    def randomize(self, n=None) -> None:
        """Replace the configs with ``n`` random ones and reset."""
        if n is not None:
            self.set_body_count(n)
        self.configs = random_configs(self.body_count, self.rng)
        logger.info("generated %d random body configs", self.body_count)
        self.reset()

    # ------------------------------------------------------------------
    def tick(self, real_elapsed_seconds: float) -> float:
        """Advance the simulation by one frame.

        Returns the simulated time step that was applied, ``0.0`` when
        paused or empty.
        """
        try:
            elapsed = float(real_elapsed_seconds)
        except (TypeError, ValueError):
            raise InvalidArgument(
                f"elapsed time must be a number, got {real_elapsed_seconds!r}"
            ) from None
        if not math.isfinite(elapsed) or elapsed < 0:
            raise InvalidArgument(
                f"elapsed time must be finite and >= 0, got {real_elapsed_seconds!r}"
            )
        if self.paused or not self.bodies:
            return 0.0

        dt = elapsed * self.time_rate
        integrate(self.bodies, dt, self.g_constant)
        for body in self.bodies:
            body.record_trail()
        self.simulation_time += dt
        return dt

    # ------------------------------------------------------------------
    def positions(self) -> np.ndarray:
        """Current positions as an ``(n, 3)`` array."""
        if not self.bodies:
            return np.zeros((0, 3), dtype=float)
        return np.array([b.pos for b in self.bodies], dtype=float)

    def trails(self):
        """Trail point arrays, one per body, in body order."""
        return [b.trail.as_array() for b in self.bodies]
