"""Two- and three-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Union

Scalar = Union[int, float]


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float))


@dataclass(frozen=True, slots=True)
class Vector3:
    """An immutable 3D vector; arithmetic returns new vectors."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vector3]
    RIGHT: ClassVar[Vector3]
    LEFT: ClassVar[Vector3]
    UP: ClassVar[Vector3]
    DOWN: ClassVar[Vector3]
    BACKWARD: ClassVar[Vector3]
    FORWARD: ClassVar[Vector3]

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """The vector scaled to unit length; raises ZeroDivisionError for zero."""
        return self / self.length()

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def copy(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3 | Scalar) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)
        if _is_scalar(other):
            return Vector3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: Vector3 | Scalar) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)
        if _is_scalar(other):
            return Vector3(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, other: Vector3 | Scalar) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if _is_scalar(other):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> Vector3:
        if _is_scalar(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Vector3 | Scalar) -> Vector3:
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if _is_scalar(other):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.RIGHT = Vector3(1.0, 0.0, 0.0)
Vector3.LEFT = Vector3(-1.0, 0.0, 0.0)
Vector3.UP = Vector3(0.0, 1.0, 0.0)
Vector3.DOWN = Vector3(0.0, -1.0, 0.0)
Vector3.BACKWARD = Vector3(0.0, 0.0, 1.0)
Vector3.FORWARD = Vector3(0.0, 0.0, -1.0)


@dataclass(frozen=True, slots=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other: Vector2) -> Vector2:
        if isinstance(other, Vector2):
            return Vector2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, other: Scalar) -> Vector2:
        if _is_scalar(other):
            return Vector2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> Vector2:
        return self.__mul__(other)