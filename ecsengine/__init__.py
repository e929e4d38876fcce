"""An entity-component-system engine core with 3D maths, GJK collision and a demo scene."""

__version__ = "0.1.0"

__all__ = [
    "angle",
    "collision",
    "color",
    "components",
    "game",
    "gravity",
    "input",
    "matrix4",
    "movement",
    "quaternion",
    "registry",
    "rotation",
    "transformer",
    "vector",
]