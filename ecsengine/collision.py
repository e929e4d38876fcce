"""Convex collision detection with the GJK algorithm."""

from __future__ import annotations

import sys
from typing import Iterator

from ecsengine.components import Collider, Transform
from ecsengine.matrix4 import Matrix4
from ecsengine.registry import Clock, Entity, Registry, State, System
from ecsengine.vector import Vector3

_MAX_POINTS = 4


class Simplex:
    """Up to four points, newest first, used while running GJK."""

    def __init__(self) -> None:
        self._points: list[Vector3] = [Vector3.ZERO] * _MAX_POINTS
        self._size = 0

    def push_front(self, point: Vector3) -> None:
        """Insert a point at the front, dropping the oldest beyond four."""
        self._points = [point, *self._points[: _MAX_POINTS - 1]]
        self._size = min(self._size + 1, _MAX_POINTS)

    def assign(self, *args: Vector3) -> None:
        """Replace the leading points with ``args`` and set the size to match."""
        if len(args) > _MAX_POINTS:
            raise ValueError(f"a simplex holds at most {_MAX_POINTS} points")
        self._points[: len(args)] = args
        self._size = len(args)

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Vector3:
        if not 0 <= index < self._size:
            raise IndexError("simplex index out of range")
        return self._points[index]

    def __iter__(self) -> Iterator[Vector3]:
        return iter(self._points[: self._size])


def same_direction(direction1: Vector3, direction2: Vector3) -> bool:
    """True when the two vectors point into the same half-space."""
    return direction1.dot(direction2) > 0


def furthest_point(collider: Collider, matrix: Matrix4, direction: Vector3) -> Vector3:
    """The transformed collider vertex furthest along ``direction``."""
    max_point = Vector3.ZERO
    max_distance = -sys.float_info.max
    for vertex in collider.vertices:
        point = matrix.transform_point(vertex)
        distance = point.dot(direction)
        if distance > max_distance:
            max_distance = distance
            max_point = point
    return max_point


def support_point(
    collider1: Collider,
    collider2: Collider,
    matrix1: Matrix4,
    matrix2: Matrix4,
    direction: Vector3,
) -> Vector3:
    """Support point of the Minkowski difference of two colliders."""
    return furthest_point(collider1, matrix1, direction) - furthest_point(
        collider2, matrix2, -direction
    )


def _line(points: Simplex, direction: Vector3) -> tuple[bool, Vector3]:
    a, b = points[0], points[1]
    ab = b - a
    ao = -a
    if same_direction(ab, ao):
        return False, ab.cross(ao).cross(ab)
    points.assign(a)
    return False, ao


def _triangle(points: Simplex, direction: Vector3) -> tuple[bool, Vector3]:
    a, b, c = points[0], points[1], points[2]
    ab = b - a
    ac = c - a
    ao = -a
    abc = ab.cross(ac)

    if same_direction(abc.cross(ac), ao):
        if same_direction(ac, ao):
            points.assign(a, c)
            return False, ac.cross(ao).cross(ac)
        points.assign(a, b)
        return _line(points, direction)
    if same_direction(ab.cross(abc), ao):
        points.assign(a, b)
        return _line(points, direction)
    if same_direction(abc, ao):
        return False, abc
    points.assign(a, c, b)
    return False, -abc


def _tetrahedron(points: Simplex, direction: Vector3) -> tuple[bool, Vector3]:
    a, b, c, d = points[0], points[1], points[2], points[3]
    ab = b - a
    ac = c - a
    ad = d - a
    ao = -a

    if same_direction(ab.cross(ac), ao):
        points.assign(a, b, c)
        return _triangle(points, direction)
    if same_direction(ac.cross(ad), ao):
        points.assign(a, c, d)
        return _triangle(points, direction)
    if same_direction(ad.cross(ab), ao):
        points.assign(a, d, b)
        return _triangle(points, direction)
    return True, direction


_HANDLERS = {2: _line, 3: _triangle, 4: _tetrahedron}


def _next_simplex(points: Simplex, direction: Vector3) -> tuple[bool, Vector3]:
    handler = _HANDLERS.get(len(points))
    if handler is None:
        return False, direction
    return handler(points, direction)


def gjk(
    collider1: Collider,
    collider2: Collider,
    matrix1: Matrix4,
    matrix2: Matrix4,
) -> bool:
    """True when the two transformed convex colliders intersect."""
    support = support_point(collider1, collider2, matrix1, matrix2, Vector3.RIGHT)
    points = Simplex()
    points.push_front(support)
    direction = -support

    while True:
        support = support_point(collider1, collider2, matrix1, matrix2, direction)
        if support.dot(direction) <= 0:
            return False
        points.push_front(support)
        done, direction = _next_simplex(points, direction)
        if done:
            return True


class Collision(System):
    """Tests every pair of collider entities and records the overlapping ones."""

    def __init__(self) -> None:
        self.colliding: set[tuple[Entity, Entity]] = set()

    def run(self, registry: Registry, state: State, clock: Clock) -> None:
        entities = registry.view(Transform, Collider)
        bodies = [
            (
                entity,
                registry.get(entity, Collider),
                Matrix4.from_transform(registry.get(entity, Transform)),
            )
            for entity in entities
        ]
        self.colliding = {
            (entity1, entity2)
            for entity1, collider1, matrix1 in bodies
            for entity2, collider2, matrix2 in bodies
            if entity1 != entity2 and gjk(collider1, collider2, matrix1, matrix2)
        }