import pytest

from ecsengine.components import Spin, Transform
from ecsengine.quaternion import Quaternion
from ecsengine.registry import Clock, Registry, State
from ecsengine.rotation import Rotation
from ecsengine.vector import Vector3


def test_rotation_follows_elapsed_time():
    registry = Registry()
    registry.add(1, Transform())
    registry.add(1, Spin(axis=Vector3.UP, speed=100.0))
    Rotation().run(registry, State(), Clock(elapsed_time=2.0))
    expected = Quaternion.from_axis_angle(Vector3.UP, 200.0)
    assert tuple(registry.get(1, Transform).rotation) == pytest.approx(tuple(expected))


def test_half_turn_around_up():
    registry = Registry()
    registry.add(1, Transform())
    registry.add(1, Spin(axis=Vector3.UP, speed=180.0))
    Rotation().run(registry, State(), Clock(elapsed_time=1.0))
    rotation = registry.get(1, Transform).rotation
    assert tuple(rotation) == pytest.approx((0, 1, 0, 0), abs=1e-9)


def test_zero_time_is_identity():
    registry = Registry()
    registry.add(1, Transform(rotation=Quaternion(1, 0, 0, 0)))
    registry.add(1, Spin(axis=Vector3.UP, speed=100.0))
    Rotation().run(registry, State(), Clock(elapsed_time=0.0))
    assert registry.get(1, Transform).rotation == Quaternion()


def test_entities_without_spin_are_untouched():
    registry = Registry()
    original = Quaternion(0, 0, 1, 0)
    registry.add(4, Transform(rotation=original))
    Rotation().run(registry, State(), Clock(elapsed_time=3.0))
    assert registry.get(4, Transform).rotation == original