"""Applies Spin components to transforms."""

from __future__ import annotations

from ecsengine.components import Spin, Transform
from ecsengine.quaternion import Quaternion
from ecsengine.registry import Clock, Registry, State, System


class Rotation(System):
    """Sets each spinning entity's rotation from the elapsed time."""

    def run(self, registry: Registry, state: State, clock: Clock) -> None:
        for entity in registry.view(Transform, Spin):
            transform = registry.get(entity, Transform)
            spin = registry.get(entity, Spin)
            transform.rotation = Quaternion.from_axis_angle(
                spin.axis, spin.speed * clock.elapsed_time
            )