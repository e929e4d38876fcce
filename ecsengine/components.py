"""Component types that entities carry."""

from __future__ import annotations

from dataclasses import dataclass, field

from ecsengine.angle import Angle
from ecsengine.matrix4 import Matrix4
from ecsengine.quaternion import Quaternion
from ecsengine.vector import Vector3


class Component:
    """Base class of everything that can be attached to an entity."""


@dataclass
class Camera(Component):
    """Viewing direction and perspective settings."""

    forward: Vector3 = Vector3.FORWARD
    right: Vector3 = Vector3.RIGHT
    up: Vector3 = Vector3.UP
    field_of_view: Angle = Angle(110.0)
    aspect_ratio: float = 16.0 / 9.0
    near: float = 0.1
    far: float = 1000.0


@dataclass
class Collider(Component):
    """Convex hull vertices in model space."""

    vertices: list[Vector3] = field(default_factory=list)


@dataclass
class Matrices(Component):
    """Local and world model matrices."""

    local: Matrix4 = field(default_factory=Matrix4)
    world: Matrix4 = field(default_factory=Matrix4)


_Triple = tuple[float, float, float]
_Pair = tuple[float, float]


def _interleave(
    vertices: list[tuple[_Triple, _Triple, _Triple, _Pair]],
) -> list[float]:
    """Flatten (position, normal, color, uv) records into one float list."""
    return [
        float(value)
        for position, normal, color, uv in vertices
        for part in (position, normal, color, uv)
        for value in part
    ]


@dataclass
class Mesh(Component):
    """Interleaved vertex data (position, normal, color, uv) and indices."""

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    material_id: int = 0

    @staticmethod
    def create_triangle(size: float, material_id: int) -> Mesh:
        r = size / 2
        normal = (0, 0, 1)
        return Mesh(
            vertices=_interleave(
                [
                    ((0, r, 0), normal, (1, 0, 0), (0.5, 1)),
                    ((-r, -r, 0), normal, (0, 1, 0), (0, 0)),
                    ((r, -r, 0), normal, (0, 0, 1), (1, 0)),
                ]
            ),
            indices=[0, 1, 2],
            material_id=material_id,
        )

    @staticmethod
    def create_cube(size: float, material_id: int) -> Mesh:
        r = size / 2
        red, green, blue = (1, 0, 0), (0, 1, 0), (0, 0, 1)
        left, right = (-1, 0, 0), (1, 0, 0)
        bottom, top = (0, -1, 0), (0, 1, 0)
        rear, front = (0, 0, -1), (0, 0, 1)
        records = [
            ((-r, -r, -r), left, red, (0, 0)),
            ((-r, r, -r), left, red, (0, 1)),
            ((-r, -r, r), left, red, (0, 0)),
            ((-r, r, r), left, red, (0, 1)),
            ((r, -r, -r), right, red, (1, 0)),
            ((r, r, -r), right, red, (1, 1)),
            ((r, -r, r), right, red, (1, 0)),
            ((r, r, r), right, red, (1, 1)),
            ((-r, -r, -r), bottom, green, (0, 0)),
            ((r, -r, -r), bottom, green, (1, 0)),
            ((-r, -r, r), bottom, green, (0, 0)),
            ((r, -r, r), bottom, green, (1, 0)),
            ((-r, r, -r), top, green, (0, 1)),
            ((r, r, -r), top, green, (1, 1)),
            ((-r, r, r), top, green, (0, 1)),
            ((r, r, r), top, green, (1, 1)),
            ((-r, -r, -r), rear, blue, (0, 0)),
            ((r, -r, -r), rear, blue, (1, 0)),
            ((-r, r, -r), rear, blue, (0, 1)),
            ((r, r, -r), rear, blue, (1, 1)),
            ((-r, -r, r), front, blue, (0, 0)),
            ((r, -r, r), front, blue, (1, 0)),
            ((-r, r, r), front, blue, (0, 1)),
            ((r, r, r), front, blue, (1, 1)),
        ]
        indices = [
            0, 2, 1, 1, 2, 3,
            4, 5, 6, 6, 5, 7,
            8, 9, 10, 10, 9, 11,
            12, 14, 13, 13, 14, 15,
            16, 18, 17, 17, 18, 19,
            20, 21, 22, 22, 21, 23,
        ]
        return Mesh(
            vertices=_interleave(records),
            indices=indices,
            material_id=material_id,
        )

    @staticmethod
    def create_skybox() -> Mesh:
        """Positions only, 36 vertices of a unit cube drawn without indices."""
        positions = [
            (-1, 1, -1), (-1, -1, -1), (1, -1, -1),
            (1, -1, -1), (1, 1, -1), (-1, 1, -1),
            (-1, -1, 1), (-1, -1, -1), (-1, 1, -1),
            (-1, 1, -1), (-1, 1, 1), (-1, -1, 1),
            (1, -1, -1), (1, -1, 1), (1, 1, 1),
            (1, 1, 1), (1, 1, -1), (1, -1, -1),
            (-1, -1, 1), (-1, 1, 1), (1, 1, 1),
            (1, 1, 1), (1, -1, 1), (-1, -1, 1),
            (-1, 1, -1), (1, 1, -1), (1, 1, 1),
            (1, 1, 1), (-1, 1, 1), (-1, 1, -1),
            (-1, -1, -1), (-1, -1, 1), (1, -1, -1),
            (1, -1, -1), (-1, -1, 1), (1, -1, 1),
        ]
        return Mesh(
            vertices=[float(value) for point in positions for value in point],
            indices=[],
            material_id=0,
        )


@dataclass
class Parent(Component):
    """Link to a parent entity."""

    entity: int = 0


@dataclass
class Physics(Component):
    """Linear motion state."""

    velocity: Vector3 = Vector3.ZERO
    acceleration: Vector3 = Vector3.ZERO
    mass: float = 1.0


@dataclass
class Transform(Component):
    """Position, rotation and scale of an entity."""

    position: Vector3 = Vector3.ZERO
    rotation: Quaternion = field(default_factory=Quaternion)
    scale: Vector3 = Vector3(1.0, 1.0, 1.0)


@dataclass
class Spin(Component):
    """Constant rotation around an axis, in degrees per second."""

    axis: Vector3 = Vector3.ZERO
    speed: float = 0.0