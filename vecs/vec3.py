"""3D vector over any numeric element type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Number
from typing import Generic, Iterable, Iterator, TypeVar

import numpy as np

from . import config, scalar

N = TypeVar("N")


@dataclass
class Vec3(Generic[N]):
    """3D vector with componentwise arithmetic and a right-handed cross product."""

    x: N
    y: N
    z: N

    @classmethod
    def zero(cls) -> "Vec3[float]":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values: Iterable) -> "Vec3":
        """Build a vector from a 3-element sequence or NumPy array."""
        items = np.asarray(values).ravel().tolist()
        if len(items) != 3:
            raise ValueError(f"Expected 3 values for Vec3, got {len(items)}.")
        return cls(items[0], items[1], items[2])

    def __add__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iadd__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vec3") -> "Vec3":
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __mul__(self, other: "N | Vec3") -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, Number):
            return Vec3(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, k: N) -> "Vec3":
        if not isinstance(k, Number):
            return NotImplemented
        return Vec3(k * self.x, k * self.y, k * self.z)

    def __truediv__(self, other: "N | Vec3") -> "Vec3":
        if isinstance(other, Vec3):
            return Vec3(
                scalar.divide(self.x, other.x),
                scalar.divide(self.y, other.y),
                scalar.divide(self.z, other.z),
            )
        if isinstance(other, Number):
            return Vec3(
                scalar.divide(self.x, other),
                scalar.divide(self.y, other),
                scalar.divide(self.z, other),
            )
        return NotImplemented

    def __rtruediv__(self, k: N) -> "Vec3":
        if not isinstance(k, Number):
            return NotImplemented
        return Vec3(scalar.divide(k, self.x), scalar.divide(k, self.y), scalar.divide(k, self.z))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[N]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def dot(self, other: "Vec3") -> N:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        """Right-handed cross product ``self x other``."""
        x = (self.y * other.z) - (self.z * other.y)
        y = (self.x * other.z) - (self.z * other.x)
        z = (self.x * other.y) - (self.y * other.x)
        return Vec3(x, -y, z)

    def length_squared(self) -> N:
        return self.x**2 + self.y**2 + self.z**2

    def length(self) -> N:
        return scalar.sqrt(self.length_squared())

    def distance(self, other: "Vec3") -> N:
        return (self - other).length()

    def normalize(self) -> "Vec3":
        return self / self.length()

    def abs(self) -> "Vec3":
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    __abs__ = abs

    def set(self, x: N, y: N, z: N) -> None:
        self.x = x
        self.y = y
        self.z = z

    def copy(self) -> "Vec3":
        return Vec3(self.x, self.y, self.z)

    def to_tuple(self) -> tuple[N, N, N]:
        return (self.x, self.y, self.z)

    def to_array(self, dtype=config.DEFAULT_ARRAY_DTYPE) -> np.ndarray:
        return np.array((self.x, self.y, self.z), dtype=dtype)

    def is_close(
        self,
        other: "Vec3",
        rel_tol: float = config.DEFAULT_REL_TOL,
        abs_tol: float = config.DEFAULT_ABS_TOL,
    ) -> bool:
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )
