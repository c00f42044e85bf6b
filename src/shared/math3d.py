"""
#WHERE
    Used by placement/spawner.py, world_host/camera.py, world_host/scene.py,
    main.py and the tests.

#WHAT
    Vector and quaternion helpers mirroring the script host's ``Vec3`` /
    ``Quat`` API.  Script frame: right-handed, Y up, forward = -Z,
    right = +X.  Euler angles are (pitch, yaw, roll) about (X, Y, Z),
    composed as yaw · pitch · roll.

#INPUT
    3-sequences (vectors) and 4-sequences (x, y, z, w) quaternions.

#OUTPUT
    Plain tuples of floats.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

Vec3 = Tuple[float, float, float]
Quat = Tuple[float, float, float, float]

IDENTITY: Quat = (0.0, 0.0, 0.0, 1.0)

UNIT_X: Vec3 = (1.0, 0.0, 0.0)
UNIT_Y: Vec3 = (0.0, 1.0, 0.0)
UNIT_Z: Vec3 = (0.0, 0.0, 1.0)

FRONT: Vec3 = (0.0, 0.0, -1.0)
RIGHT: Vec3 = UNIT_X
UP: Vec3 = UNIT_Y

# cos(pitch) below this is treated as gimbal lock
_GIMBAL_EPS = 1e-6


def _vec(v: Sequence[float]) -> Vec3:
    return (float(v[0]), float(v[1]), float(v[2]))


# ── Vec3 ──────────────────────────────────────────────────────────────────────

def vec3_sum(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return _vec(np.asarray(a, dtype=np.float64) + np.asarray(b, dtype=np.float64))


def vec3_multiply(scale: float, v: Sequence[float]) -> Vec3:
    return _vec(float(scale) * np.asarray(v, dtype=np.float64))


def vec3_distance(a: Sequence[float], b: Sequence[float]) -> float:
    return float(np.linalg.norm(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)))


# ── Quat ──────────────────────────────────────────────────────────────────────

def normalize(q: Sequence[float]) -> Quat:
    arr = np.asarray(q, dtype=np.float64)
    n = np.linalg.norm(arr)
    if n < 1e-12:
        raise ValueError("Cannot normalize a zero-length quaternion")
    arr = arr / n
    return (float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))


def multiply(q1: Sequence[float], q2: Sequence[float]) -> Quat:
    """Hamilton product ``q1 * q2`` (q2 is applied first)."""
    x1, y1, z1, w1 = q1
    x2, y2, z2, w2 = q2
    return (
        float(w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2),
        float(w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2),
        float(w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2),
        float(w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2),
    )


def angle_axis(angle_deg: float, axis: Sequence[float]) -> Quat:
    axis_arr = np.asarray(axis, dtype=np.float64)
    n = np.linalg.norm(axis_arr)
    if n < 1e-12:
        raise ValueError("Rotation axis must be non-zero")
    axis_arr = axis_arr / n
    half = math.radians(angle_deg) / 2.0
    s = math.sin(half)
    return (float(axis_arr[0] * s), float(axis_arr[1] * s),
            float(axis_arr[2] * s), math.cos(half))


def to_matrix(q: Sequence[float]) -> np.ndarray:
    """Unit quaternion to 3x3 rotation matrix."""
    x, y, z, w = normalize(q)
    return np.array([
        [1 - 2 * (y * y + z * z), 2 * (x * y - z * w),     2 * (x * z + y * w)],
        [2 * (x * y + z * w),     1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
        [2 * (x * z - y * w),     2 * (y * z + x * w),     1 - 2 * (x * x + y * y)],
    ], dtype=np.float64)


def rotate(q: Sequence[float], v: Sequence[float]) -> Vec3:
    return _vec(to_matrix(q) @ np.asarray(v, dtype=np.float64))


def get_forward(q: Sequence[float]) -> Vec3:
    return rotate(q, FRONT)


get_front = get_forward


def get_right(q: Sequence[float]) -> Vec3:
    return rotate(q, RIGHT)


def get_up(q: Sequence[float]) -> Vec3:
    return rotate(q, UP)


# ── Euler angles ──────────────────────────────────────────────────────────────

def from_pitch_yaw_roll_degrees(pitch: float, yaw: float, roll: float) -> Quat:
    q = multiply(angle_axis(yaw, UNIT_Y), angle_axis(pitch, UNIT_X))
    return multiply(q, angle_axis(roll, UNIT_Z))


def from_vec3_degrees(euler: Sequence[float]) -> Quat:
    """(pitch, yaw, roll) in degrees to quaternion."""
    return from_pitch_yaw_roll_degrees(euler[0], euler[1], euler[2])


def safe_euler_angles(q: Sequence[float]) -> Vec3:
    """Quaternion to (pitch, yaw, roll) degrees.

    Inverse of :func:`from_vec3_degrees`.  At gimbal lock (pitch = ±90°)
    roll is not recoverable, so it is folded into yaw and reported as 0.
    """
    m = to_matrix(q)
    sin_pitch = float(np.clip(-m[1, 2], -1.0, 1.0))
    pitch = math.asin(sin_pitch)
    if math.cos(pitch) > _GIMBAL_EPS:
        yaw = math.atan2(m[0, 2], m[2, 2])
        roll = math.atan2(m[1, 0], m[1, 1])
    else:
        yaw = math.atan2(-m[2, 0], m[0, 0])
        roll = 0.0
    return (math.degrees(pitch), math.degrees(yaw), math.degrees(roll))
