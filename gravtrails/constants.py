"""Scene-scale constants and tunables.

The units are arbitrary scene units chosen so that the default scene orbits
at a watchable pace; ``G`` is not the SI gravitational constant.
"""

import numpy as np

# --- Physics ---
G = 1e-3

DEFAULT_TIME_RATE = 50.0
DEFAULT_BODY_COUNT = 3

# --- Trails ---
DEFAULT_TRAIL_LENGTH = 3000
UNBOUNDED_TRAIL = -1

# --- Random scene generation ---
RANDOM_RADIUS_RANGE = (1.0, 6.0)
RANDOM_MASS_RANGE = (10000.0, 110000.0)
RANDOM_POSITION_EXTENT = 400
RANDOM_MAX_SPEED = 0.5
DEFAULT_BODY_RADIUS = 5.0

# --- Display ---
WIDTH, HEIGHT = 1280, 800
FPS = 60
UI_SIDEBAR_WIDTH = 240
FIELD_OF_VIEW = 75.0
NEAR_PLANE = 0.1
CAMERA_POSITION = np.array([445.0, 180.0, 445.0])
CAMERA_TARGET = np.array([0.0, 0.0, 0.0])
CAMERA_ORBIT_SPEED = 0.005
CAMERA_ZOOM_STEP = 1.1
MIN_CAMERA_DISTANCE = 10.0
MAX_CAMERA_DISTANCE = 20000.0
AXES_LENGTH = 1000.0
TIME_RATE_SLIDER_RANGE = (0, 200)
ENERGY_HISTORY_LENGTH = 500

# --- Colors ---
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (50, 50, 50)
AXIS_COLORS = ((200, 60, 60), (60, 200, 60), (60, 60, 200))
