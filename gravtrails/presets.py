"""Built-in scenes.

Each entry is a list of plain configuration mappings accepted by
:meth:`gravtrails.config.BodyConfig.from_dict`.
"""

DEFAULT_SCENE = [
    {
        "radius": 20,
        "position": {"x": 0, "y": 0, "z": 0},
        "velocity": {"x": 0, "y": 0, "z": 0},
        "mass": 20000000,
    },
    {
        "radius": 5,
        "position": {"x": 100, "y": 0, "z": 0},
        "velocity": {"x": 0, "y": 0, "z": -14},
        "mass": 10000,
    },
    {
        "radius": 5,
        "position": {"x": 200, "y": 0, "z": 0},
        "velocity": {"x": 0, "y": 0, "z": -10},
        "mass": 10000,
    },
    {
        "radius": 8,
        "position": {"x": 350, "y": 0, "z": 0},
        "velocity": {"x": 0, "y": 0, "z": -8},
        "mass": 50000,
    },
    {
        "radius": 6,
        "position": {"x": 450, "y": 0, "z": 0},
        "velocity": {"x": 0, "y": 1, "z": -6},
        "mass": 80000,
    },
]

PRESETS = {
    "Default": DEFAULT_SCENE,
}
