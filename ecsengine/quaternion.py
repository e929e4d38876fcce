"""Rotation quaternions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

from ecsengine.angle import Angle
from ecsengine.vector import Vector3


@dataclass(frozen=True, slots=True)
class Quaternion:
    """An immutable quaternion; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: Union[Angle, int, float]) -> Quaternion:
        """Rotation of ``angle`` (an Angle or degrees) around ``axis``."""
        if not isinstance(angle, Angle):
            angle = Angle(float(angle))
        half = angle.as_radians() / 2
        vector = axis * math.sin(half)
        return Quaternion(vector.x, vector.y, vector.z, math.cos(half))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w