import math

import pytest

from ecsengine.components import Camera, Transform
from ecsengine.input import Action, Key, Keyboard, Mouse
from ecsengine.movement import Movement
from ecsengine.registry import Clock, Registry, State
from ecsengine.vector import Vector3


def _setup(center=True):
    registry = Registry()
    registry.add(0, Transform())
    registry.add(0, Camera())
    keyboard = Keyboard()
    mouse = Mouse()
    if center:
        mouse.handle_cursor(960, 540)
    return registry, keyboard, mouse, Movement(keyboard, mouse)


def test_centered_mouse_faces_forward():
    registry, _, _, movement = _setup()
    movement.run(registry, State(), Clock(delta_time=0.1))
    camera = registry.get(0, Camera)
    assert tuple(camera.forward) == pytest.approx(tuple(Vector3.FORWARD), abs=1e-9)
    assert tuple(camera.up) == pytest.approx(tuple(Vector3.UP), abs=1e-9)


def test_w_moves_along_forward():
    registry, keyboard, _, movement = _setup()
    keyboard.handle_key(Key.W, Action.PRESS)
    movement.run(registry, State(), Clock(delta_time=0.5))
    position = registry.get(0, Transform).position
    assert position.length() == pytest.approx(5.0)
    assert position.z < 0


def test_opposite_keys_cancel():
    registry, keyboard, _, movement = _setup()
    for key in Key:
        keyboard.handle_key(key, Action.PRESS)
    movement.run(registry, State(), Clock(delta_time=0.5))
    position = registry.get(0, Transform).position
    assert tuple(position) == pytest.approx((0, 0, 0), abs=1e-9)


def test_released_key_stops_movement():
    registry, keyboard, _, movement = _setup()
    keyboard.handle_key(Key.D, Action.PRESS)
    keyboard.handle_key(Key.D, Action.RELEASE)
    movement.run(registry, State(), Clock(delta_time=0.5))
    assert registry.get(0, Transform).position == Vector3.ZERO


def test_camera_basis_is_orthonormal():
    registry, _, _, movement = _setup(center=False)
    movement.run(registry, State(), Clock(delta_time=0.1))
    camera = registry.get(0, Camera)
    assert camera.forward.length() == pytest.approx(1.0)
    assert camera.right.length() == pytest.approx(1.0)
    assert camera.up.length() == pytest.approx(1.0)
    assert camera.forward.dot(camera.right) == pytest.approx(0.0, abs=1e-9)
    assert camera.up.dot(camera.forward) == pytest.approx(0.0, abs=1e-9)
    assert camera.right.dot(Vector3.UP) == pytest.approx(0.0, abs=1e-9)


def test_pitch_is_clamped():
    registry, _, mouse, movement = _setup()
    mouse.handle_cursor(960, -100000)
    movement.run(registry, State(), Clock(delta_time=0.1))
    camera = registry.get(0, Camera)
    assert camera.forward.y == pytest.approx(math.sin(math.radians(89)))
    assert movement.pitch == 89


def test_mouse_delta_is_relative_to_previous():
    registry, _, mouse, movement = _setup()
    movement.run(registry, State(), Clock(delta_time=0.1))
    movement.run(registry, State(), Clock(delta_time=0.1))
    assert movement.yaw == -90
    assert movement.pitch == 0