"""Generic 2D and 3D vector math."""

from .transforms import angle_between, lerp, rotate_point, rotate_vec2, rotate_vec3
from .vec2 import Vec2
from .vec3 import Vec3

__version__ = "0.1.0"

Vector2 = Vec2
Vector3 = Vec3

__all__ = [
    "Vec2",
    "Vec3",
    "Vector2",
    "Vector3",
    "angle_between",
    "lerp",
    "rotate_point",
    "rotate_vec2",
    "rotate_vec3",
]
