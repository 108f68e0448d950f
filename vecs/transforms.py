"""Rotations and interpolation helpers for Vec2 and Vec3."""

from __future__ import annotations

from math import cos, sin
from typing import TypeVar

import numpy as np

from . import scalar
from .vec2 import Vec2
from .vec3 import Vec3

V = TypeVar("V", Vec2, Vec3)


def rotate_vec2(vec: Vec2, angle_rad: float) -> Vec2:
    """Rotate counter-clockwise about the origin; a quarter turn equals ``normal()``."""
    return vec * cos(angle_rad) + vec.normal() * sin(angle_rad)


def rotate_point(point: Vec2, pivot: Vec2, angle_rad: float) -> Vec2:
    return pivot + rotate_vec2(point - pivot, angle_rad)


def rotate_vec3(vec: Vec3, axis: Vec3, angle_rad: float) -> Vec3:
    """Rotate a vector about an axis through the origin (Rodrigues' formula).

    Args:
        vec: Vector to rotate.
        axis: Rotation axis; normalized here, so any nonzero length works. A
            zero axis gives nan components.
        angle_rad: Rotation in radians, right-handed about ``axis``.
    """
    k = axis.normalize()
    cos_a = cos(angle_rad)
    sin_a = sin(angle_rad)
    return vec * cos_a + k.cross(vec) * sin_a + k * (k.dot(vec) * (1.0 - cos_a))


def lerp(a: V, b: V, t: float) -> V:
    """Linear interpolation; t=0 gives a, t=1 gives b."""
    return a + (b - a) * t


def angle_between(a: V, b: V) -> float:
    """Unsigned angle in radians between two vectors of the same type.

    nan when either vector has zero length.
    """
    cos_theta = scalar.divide(a.dot(b), a.length() * b.length())
    return float(np.arccos(np.clip(float(cos_theta), -1.0, 1.0)))
