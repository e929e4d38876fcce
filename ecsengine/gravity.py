"""Constant downward acceleration."""

from __future__ import annotations

from ecsengine.components import Physics, Transform
from ecsengine.registry import Clock, Registry, State, System
from ecsengine.vector import Vector3


class Gravity(System):
    """Accelerates every physics entity downwards."""

    def __init__(self, constant: float) -> None:
        self.constant = Vector3.DOWN * constant

    def run(self, registry: Registry, state: State, clock: Clock) -> None:
        dt = clock.delta_time
        for entity in registry.view(Transform, Physics):
            transform = registry.get(entity, Transform)
            physics = registry.get(entity, Physics)
            physics.acceleration = physics.acceleration + self.constant * physics.mass * dt
            physics.velocity = physics.velocity + physics.acceleration * dt
            transform.position = transform.position + physics.velocity * dt