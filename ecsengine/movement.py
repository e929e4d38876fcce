"""First-person camera control from keyboard and mouse."""

from __future__ import annotations

import math

from ecsengine.angle import Angle
from ecsengine.components import Camera, Transform
from ecsengine.input import Key, Keyboard, Mouse
from ecsengine.registry import Clock, Registry, State, System
from ecsengine.vector import Vector2, Vector3

_SPEED = 10
_SENSITIVITY = 0.1
_PITCH_LIMIT = 89.0


class Movement(System):
    """Moves the active camera with WASD and turns it with the mouse."""

    def __init__(self, keyboard: Keyboard | None = None, mouse: Mouse | None = None) -> None:
        self.keyboard = keyboard if keyboard is not None else Keyboard()
        self.mouse = mouse if mouse is not None else Mouse()
        self.world_up = Vector3.UP
        self.previous_position = Vector2(1920.0 / 2, 1080.0 / 2)
        self.yaw = Angle(-90.0)
        self.pitch = Angle(0.0)

    def run(self, registry: Registry, state: State, clock: Clock) -> None:
        transform = registry.get(state.active_camera, Transform)
        camera = registry.get(state.active_camera, Camera)

        velocity = _SPEED * clock.delta_time
        moves = (
            (Key.W, camera.forward),
            (Key.S, -camera.forward),
            (Key.D, camera.right),
            (Key.A, -camera.right),
        )
        for key, direction in moves:
            if self.keyboard.is_key_pressed(key):
                transform.position = transform.position + direction * velocity

        position = self.mouse.get_position()
        offset = Vector2(
            position.x - self.previous_position.x,
            self.previous_position.y - position.y,
        )
        self.previous_position = position
        offset = offset * _SENSITIVITY

        self.yaw = self.yaw + offset.x
        self.pitch = self.pitch + offset.y
        if self.pitch > _PITCH_LIMIT:
            self.pitch = Angle(_PITCH_LIMIT)
        if self.pitch < -_PITCH_LIMIT:
            self.pitch = Angle(-_PITCH_LIMIT)

        yaw = self.yaw.as_radians()
        pitch = self.pitch.as_radians()
        direction = Vector3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )

        camera.forward = direction.normalized()
        camera.right = camera.forward.cross(self.world_up).normalized()
        camera.up = camera.right.cross(camera.forward).normalized()