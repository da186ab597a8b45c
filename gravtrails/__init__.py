"""Real-time n-body gravity simulation with position trails."""

from importlib.metadata import PackageNotFoundError, version

from .constants import G
from .config import BodyConfig, random_configs
from .errors import GravtrailsError, InvalidArgument, InvalidConfiguration
from .integrators import compute_forces, semi_implicit_euler_step_arrays
from .physics import Body, force, integrate, net_forces
from .simulation import SimulationController
from .trail import Trail, record

try:
    __version__ = version("gravtrails")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "G",
    "Body",
    "BodyConfig",
    "GravtrailsError",
    "InvalidArgument",
    "InvalidConfiguration",
    "SimulationController",
    "Trail",
    "compute_forces",
    "force",
    "integrate",
    "net_forces",
    "random_configs",
    "record",
    "semi_implicit_euler_step_arrays",
    "__version__",
]
