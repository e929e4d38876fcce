"""Computes local and world matrices of every transform."""

from __future__ import annotations

from ecsengine.components import Matrices, Parent, Transform
from ecsengine.matrix4 import Matrix4
from ecsengine.quaternion import Quaternion
from ecsengine.registry import Clock, Registry, State, System
from ecsengine.vector import Vector3

_SPINNING_ENTITY = 2
_SPIN_SPEED = 100


class Transformer(System):
    """Keeps each entity's Matrices component up to date."""

    def run(self, registry: Registry, state: State, clock: Clock) -> None:
        for entity in registry.view(Transform):
            transform = registry.get(entity, Transform)

            if entity == _SPINNING_ENTITY:
                transform.rotation = Quaternion.from_axis_angle(
                    Vector3.RIGHT, clock.elapsed_time * _SPIN_SPEED
                )

            local = Matrix4.from_transform(transform)
            world = local

            if registry.has(entity, Parent):
                parent = registry.get(entity, Parent)
                if registry.has(parent.entity, Matrices):
                    world = local @ registry.get(parent.entity, Matrices).world

            if registry.has(entity, Matrices):
                matrices = registry.get(entity, Matrices)
                matrices.local = local
                matrices.world = world
            else:
                registry.add(entity, Matrices(local=local, world=world))