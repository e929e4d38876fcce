"""Row-major 4x4 matrices using the row-vector convention."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import Any

from ecsengine.angle import Angle
from ecsengine.quaternion import Quaternion
from ecsengine.vector import Vector3


@dataclass(frozen=True, slots=True)
class Matrix4:
    """An immutable 4x4 matrix; the default is the identity."""

    m00: float = 1.0
    m01: float = 0.0
    m02: float = 0.0
    m03: float = 0.0
    m10: float = 0.0
    m11: float = 1.0
    m12: float = 0.0
    m13: float = 0.0
    m20: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m23: float = 0.0
    m30: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 1.0

    @staticmethod
    def identity() -> Matrix4:
        return Matrix4()

    def to_list(self) -> list[float]:
        """The sixteen elements in row-major order."""
        return list(astuple(self))

    def _rows(self) -> list[list[float]]:
        values = self.to_list()
        return [values[start:start + 4] for start in range(0, 16, 4)]

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = list(zip(*other._rows()))
        return Matrix4(
            *(
                sum(a * b for a, b in zip(row, column))
                for row in self._rows()
                for column in columns
            )
        )

    def inverted(self) -> Matrix4:
        """The inverse; raises ZeroDivisionError for a singular matrix."""
        b00 = self.m00 * self.m11 - self.m01 * self.m10
        b01 = self.m00 * self.m12 - self.m02 * self.m10
        b02 = self.m00 * self.m13 - self.m03 * self.m10
        b03 = self.m01 * self.m12 - self.m02 * self.m11
        b04 = self.m01 * self.m13 - self.m03 * self.m11
        b05 = self.m02 * self.m13 - self.m03 * self.m12
        b06 = self.m20 * self.m31 - self.m21 * self.m30
        b07 = self.m20 * self.m32 - self.m22 * self.m30
        b08 = self.m20 * self.m33 - self.m23 * self.m30
        b09 = self.m21 * self.m32 - self.m22 * self.m31
        b10 = self.m21 * self.m33 - self.m23 * self.m31
        b11 = self.m22 * self.m33 - self.m23 * self.m32

        det = b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06
        inv = 1 / det

        return Matrix4(
            (self.m11 * b11 - self.m12 * b10 + self.m13 * b09) * inv,
            (self.m02 * b10 - self.m01 * b11 - self.m03 * b09) * inv,
            (self.m31 * b05 - self.m32 * b04 + self.m33 * b03) * inv,
            (self.m22 * b04 - self.m21 * b05 - self.m23 * b03) * inv,
            (self.m12 * b08 - self.m10 * b11 - self.m13 * b07) * inv,
            (self.m00 * b11 - self.m02 * b08 + self.m03 * b07) * inv,
            (self.m32 * b02 - self.m30 * b05 - self.m33 * b01) * inv,
            (self.m20 * b05 - self.m22 * b02 + self.m23 * b01) * inv,
            (self.m10 * b10 - self.m11 * b08 + self.m13 * b06) * inv,
            (self.m01 * b08 - self.m00 * b10 - self.m03 * b06) * inv,
            (self.m30 * b04 - self.m31 * b02 + self.m33 * b00) * inv,
            (self.m21 * b02 - self.m20 * b04 - self.m23 * b00) * inv,
            (self.m11 * b07 - self.m10 * b09 - self.m12 * b06) * inv,
            (self.m00 * b09 - self.m01 * b07 + self.m02 * b06) * inv,
            (self.m31 * b01 - self.m30 * b03 - self.m32 * b00) * inv,
            (self.m20 * b03 - self.m21 * b01 + self.m22 * b00) * inv,
        )

    def transform_point(self, vector: Vector3) -> Vector3:
        """Apply the matrix to a point; the homogeneous coordinate is not divided out."""
        return Vector3(
            self.m00 * vector.x + self.m10 * vector.y + self.m20 * vector.z + self.m30,
            self.m01 * vector.x + self.m11 * vector.y + self.m21 * vector.z + self.m31,
            self.m02 * vector.x + self.m12 * vector.y + self.m22 * vector.z + self.m32,
        )

    @staticmethod
    def from_position(position: Vector3) -> Matrix4:
        return Matrix4(m30=position.x, m31=position.y, m32=position.z)

    @staticmethod
    def from_rotation(rotation: Quaternion) -> Matrix4:
        x2 = rotation.x + rotation.x
        y2 = rotation.y + rotation.y
        z2 = rotation.z + rotation.z
        xx = rotation.x * x2
        yx = rotation.y * x2
        yy = rotation.y * y2
        zx = rotation.z * x2
        zy = rotation.z * y2
        zz = rotation.z * z2
        wx = rotation.w * x2
        wy = rotation.w * y2
        wz = rotation.w * z2
        return Matrix4(
            m00=1 - yy - zz,
            m01=yx - wz,
            m02=zx - wy,
            m10=yx - wz,
            m11=1 - xx - zz,
            m12=zy + wx,
            m20=zx + wy,
            m21=zy - wx,
            m22=1 - xx - yy,
        )

    @staticmethod
    def from_scale(scale: Vector3) -> Matrix4:
        return Matrix4(m00=scale.x, m11=scale.y, m22=scale.z)

    @staticmethod
    def from_transform(transform: Any) -> Matrix4:
        """Model matrix of an object with position, rotation and scale."""
        position = Matrix4.from_position(transform.position)
        rotation = Matrix4.from_rotation(transform.rotation)
        scale = Matrix4.from_scale(transform.scale)
        return scale @ rotation @ position

    @staticmethod
    def from_perspective(camera: Any) -> Matrix4:
        """Projection matrix from field_of_view, aspect_ratio, near and far."""
        field_of_view = camera.field_of_view
        if not isinstance(field_of_view, Angle):
            field_of_view = Angle(float(field_of_view))
        scale_y = 1 / math.tan(field_of_view.as_radians() / 2)
        scale_x = scale_y / camera.aspect_ratio
        near_minus_far = camera.near - camera.far
        return Matrix4(
            m00=scale_x,
            m11=scale_y,
            m22=(camera.far + camera.near) / near_minus_far,
            m23=-1.0,
            m32=2 * camera.far * camera.near / near_minus_far,
        )

    @staticmethod
    def from_look_at(position: Vector3, target: Vector3, up: Vector3) -> Matrix4:
        """Camera-to-world matrix placed at ``position`` and facing ``target``."""
        z_axis = (position - target).normalized()
        x_axis = up.cross(z_axis).normalized()
        y_axis = z_axis.cross(x_axis)
        return Matrix4(
            x_axis.x, x_axis.y, x_axis.z, 0.0,
            y_axis.x, y_axis.y, y_axis.z, 0.0,
            z_axis.x, z_axis.y, z_axis.z, 0.0,
            position.x, position.y, position.z, 1.0,
        )