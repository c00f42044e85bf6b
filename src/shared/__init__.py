"""
#WHERE
    Imported by the placement spawner, the world host, main.py and tests.

#WHAT
    Shared constants and the script host's Vec3 / Quat helpers.

#INPUT
    None (constants and pure functions).

#OUTPUT
    Constants module, math3d helpers.
"""

from . import constants
from .math3d import (
    # Types
    Quat,
    Vec3,

    # Axes
    IDENTITY,
    FRONT,
    RIGHT,
    UP,

    # Quat
    angle_axis,
    from_pitch_yaw_roll_degrees,
    from_vec3_degrees,
    get_forward,
    get_front,
    get_right,
    get_up,
    multiply,
    normalize,
    rotate,
    safe_euler_angles,

    # Vec3
    vec3_distance,
    vec3_multiply,
    vec3_sum,
)

__all__ = [
    "constants",
    "Quat",
    "Vec3",
    "IDENTITY",
    "FRONT",
    "RIGHT",
    "UP",
    "angle_axis",
    "from_pitch_yaw_roll_degrees",
    "from_vec3_degrees",
    "get_forward",
    "get_front",
    "get_right",
    "get_up",
    "multiply",
    "normalize",
    "rotate",
    "safe_euler_angles",
    "vec3_distance",
    "vec3_multiply",
    "vec3_sum",
]
