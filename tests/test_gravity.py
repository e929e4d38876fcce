import pytest

from ecsengine.components import Physics, Transform
from ecsengine.gravity import Gravity
from ecsengine.registry import Clock, Registry, State
from ecsengine.vector import Vector3


def _world(mass=1.0):
    registry = Registry()
    registry.add(0, Transform(position=Vector3(1, 2, 3)))
    registry.add(0, Physics(mass=mass))
    return registry


def test_gravity_pulls_down():
    registry = _world(mass=2.0)
    Gravity(10.0).run(registry, State(), Clock(delta_time=0.5))
    physics = registry.get(0, Physics)
    assert physics.acceleration.y == pytest.approx(-10.0)
    assert physics.acceleration.x == 0 and physics.acceleration.z == 0


def test_velocity_and_position_follow_acceleration():
    registry = _world()
    Gravity(9.81).run(registry, State(), Clock(delta_time=0.5))
    physics = registry.get(0, Physics)
    transform = registry.get(0, Transform)
    assert tuple(physics.velocity) == pytest.approx(tuple(physics.acceleration * 0.5))
    expected = Vector3(1, 2, 3) + physics.velocity * 0.5
    assert tuple(transform.position) == pytest.approx(tuple(expected))


def test_acceleration_accumulates_over_frames():
    registry = _world()
    gravity = Gravity(9.81)
    gravity.run(registry, State(), Clock(delta_time=1.0))
    first = registry.get(0, Physics).acceleration
    gravity.run(registry, State(), Clock(delta_time=1.0))
    second = registry.get(0, Physics).acceleration
    assert second.y == pytest.approx(2 * first.y)


def test_zero_delta_changes_nothing():
    registry = _world()
    Gravity(9.81).run(registry, State(), Clock(delta_time=0.0))
    assert registry.get(0, Transform).position == Vector3(1, 2, 3)
    assert registry.get(0, Physics).velocity == Vector3.ZERO


def test_entities_without_physics_are_untouched():
    registry = Registry()
    registry.add(5, Transform(position=Vector3(4, 4, 4)))
    Gravity(9.81).run(registry, State(), Clock(delta_time=1.0))
    assert registry.get(5, Transform).position == Vector3(4, 4, 4)