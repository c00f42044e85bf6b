"""Tests for the Vec3 / Quat helpers."""

import math

import numpy as np
import pytest

from src.shared import math3d


def _approx_vec(v, rel=None, abs=1e-9):
    return pytest.approx(list(v), rel=rel, abs=abs)


class TestAxes:

    def test_identity_forward_is_negative_z(self):
        assert list(math3d.get_forward(math3d.IDENTITY)) == _approx_vec((0, 0, -1))

    def test_identity_right_and_up(self):
        assert list(math3d.get_right(math3d.IDENTITY)) == _approx_vec((1, 0, 0))
        assert list(math3d.get_up(math3d.IDENTITY)) == _approx_vec((0, 1, 0))

    def test_front_is_alias_of_forward(self):
        q = math3d.from_pitch_yaw_roll_degrees(10, 20, 30)
        assert math3d.get_front(q) == math3d.get_forward(q)

    def test_positive_yaw_turns_left(self):
        q = math3d.from_pitch_yaw_roll_degrees(0, 90, 0)
        assert list(math3d.get_forward(q)) == _approx_vec((-1, 0, 0))

    def test_positive_pitch_looks_up(self):
        q = math3d.from_pitch_yaw_roll_degrees(30, 0, 0)
        forward = math3d.get_forward(q)
        assert forward[1] == pytest.approx(math.sin(math.radians(30)))


class TestQuat:

    def test_multiply_by_identity(self):
        q = math3d.from_pitch_yaw_roll_degrees(15, -40, 5)
        assert list(math3d.multiply(q, math3d.IDENTITY)) == _approx_vec(q)
        assert list(math3d.multiply(math3d.IDENTITY, q)) == _approx_vec(q)

    def test_normalize_scales_to_unit(self):
        q = math3d.normalize((0, 0, 0, 2))
        assert q == (0.0, 0.0, 0.0, 1.0)

    def test_normalize_zero_raises(self):
        with pytest.raises(ValueError, match="zero-length"):
            math3d.normalize((0, 0, 0, 0))

    def test_angle_axis_zero_axis_raises(self):
        with pytest.raises(ValueError):
            math3d.angle_axis(45, (0, 0, 0))

    def test_to_matrix_is_a_rotation(self):
        m = math3d.to_matrix(math3d.from_pitch_yaw_roll_degrees(-25, 135, 12))
        assert (m @ m.T).ravel().tolist() == pytest.approx([1, 0, 0, 0, 1, 0, 0, 0, 1], abs=1e-9)
        assert float(np.linalg.det(m)) == pytest.approx(1.0)


class TestEulerAngles:

    def test_identity_has_zero_angles(self):
        assert list(math3d.safe_euler_angles(math3d.IDENTITY)) == _approx_vec((0, 0, 0))

    def test_recovers_angles(self):
        q = math3d.from_vec3_degrees((20, -130, 10))
        assert list(math3d.safe_euler_angles(q)) == _approx_vec((20, -130, 10), abs=1e-6)

    def test_gimbal_lock_folds_roll_into_yaw(self):
        q = math3d.from_pitch_yaw_roll_degrees(90, 30, 0)
        pitch, yaw, roll = math3d.safe_euler_angles(q)
        assert pitch == pytest.approx(90, abs=1e-4)
        assert yaw == pytest.approx(30, abs=1e-4)
        assert roll == 0.0

    def test_unnormalized_input_is_accepted(self):
        q = tuple(2 * c for c in math3d.from_pitch_yaw_roll_degrees(0, 45, 0))
        assert math3d.safe_euler_angles(q)[1] == pytest.approx(45)


class TestVec3:

    def test_sum(self):
        assert math3d.vec3_sum((1, 2, 3), (4, 5, 6)) == (5.0, 7.0, 9.0)

    def test_multiply(self):
        assert math3d.vec3_multiply(3, (0, 0, -1)) == (0.0, 0.0, -3.0)

    def test_distance(self):
        assert math3d.vec3_distance((0, 0, 0), (3, 4, 0)) == pytest.approx(5.0)
