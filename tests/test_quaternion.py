import math

import pytest

from ecsengine.angle import deg
from ecsengine.quaternion import Quaternion
from ecsengine.vector import Vector3


def test_default_is_identity():
    assert Quaternion() == Quaternion(0, 0, 0, 1)


def test_zero_angle_is_identity():
    assert Quaternion.from_axis_angle(Vector3.UP, deg(0)) == Quaternion()


@pytest.mark.parametrize("degrees", [15, 90, 180, 270, -45])
def test_unit_axis_gives_unit_quaternion(degrees):
    q = Quaternion.from_axis_angle(Vector3.RIGHT, deg(degrees))
    assert math.sqrt(sum(c * c for c in q)) == pytest.approx(1.0)


def test_accepts_plain_degrees():
    assert Quaternion.from_axis_angle(Vector3.RIGHT, 90) == Quaternion.from_axis_angle(
        Vector3.RIGHT, deg(90)
    )


def test_half_turn_about_up():
    q = Quaternion.from_axis_angle(Vector3.UP, deg(180))
    assert q.w == pytest.approx(0.0, abs=1e-12)
    assert q.y == pytest.approx(1.0)


def test_axis_direction_is_preserved():
    axis = Vector3(1.0, 2.0, 3.0).normalized()
    q = Quaternion.from_axis_angle(axis, deg(60))
    assert tuple(Vector3(q.x, q.y, q.z).normalized()) == pytest.approx(tuple(axis))


def test_negative_angle_is_conjugate():
    axis = Vector3(0.0, 0.6, 0.8)
    q = Quaternion.from_axis_angle(axis, deg(40))
    r = Quaternion.from_axis_angle(axis, deg(-40))
    assert r.w == pytest.approx(q.w)
    assert (r.x, r.y, r.z) == pytest.approx((-q.x, -q.y, -q.z))