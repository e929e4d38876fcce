"""Angles stored in degrees."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

Scalar = Union[int, float]


def _degrees_of(value: object) -> float | None:
    if isinstance(value, Angle):
        return value.degrees
    if isinstance(value, (int, float)):
        return float(value)
    return None


@dataclass(frozen=True, slots=True, eq=False)
class Angle:
    """An angle in degrees; plain numbers compare and add as degrees."""

    degrees: float

    def as_degrees(self) -> float:
        return self.degrees

    def as_radians(self) -> float:
        return self.degrees * (math.pi / 180)

    def __add__(self, other: Angle | Scalar) -> Angle:
        value = _degrees_of(other)
        if value is None:
            return NotImplemented
        return Angle(self.degrees + value)

    __radd__ = __add__

    def __sub__(self, other: Angle | Scalar) -> Angle:
        value = _degrees_of(other)
        if value is None:
            return NotImplemented
        return Angle(self.degrees - value)

    def __neg__(self) -> Angle:
        return Angle(-self.degrees)

    def __eq__(self, other: object) -> bool:
        value = _degrees_of(other)
        if value is None:
            return NotImplemented
        return self.degrees == value

    def __hash__(self) -> int:
        return hash(self.degrees)

    def __lt__(self, other: Angle | Scalar) -> bool:
        value = _degrees_of(other)
        if value is None:
            return NotImplemented
        return self.degrees < value

    def __le__(self, other: Angle | Scalar) -> bool:
        value = _degrees_of(other)
        if value is None:
            return NotImplemented
        return self.degrees <= value

    def __gt__(self, other: Angle | Scalar) -> bool:
        value = _degrees_of(other)
        if value is None:
            return NotImplemented
        return self.degrees > value

    def __ge__(self, other: Angle | Scalar) -> bool:
        value = _degrees_of(other)
        if value is None:
            return NotImplemented
        return self.degrees >= value


def deg(value: Scalar) -> Angle:
    """Build an angle from a number of degrees."""
    return Angle(float(value))