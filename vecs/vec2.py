"""2D vector over any numeric element type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Number
from typing import Generic, Iterable, Iterator, TypeVar

import numpy as np

from . import config, scalar

N = TypeVar("N")


@dataclass
class Vec2(Generic[N]):
    """2D vector with componentwise arithmetic.

    Float division by zero yields inf/nan instead of raising, so a zero
    vector normalizes to nan components. Exact element types (int, Fraction,
    Decimal) keep their own zero-division errors.
    """

    x: N
    y: N

    @classmethod
    def zero(cls) -> "Vec2[float]":
        return cls(0.0, 0.0)

    @classmethod
    def from_array(cls, values: Iterable) -> "Vec2":
        """Build a vector from a 2-element sequence or NumPy array."""
        items = np.asarray(values).ravel().tolist()
        if len(items) != 2:
            raise ValueError(f"Expected 2 values for Vec2, got {len(items)}.")
        return cls(items[0], items[1])

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __iadd__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __mul__(self, other: "N | Vec2") -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        if isinstance(other, Number):
            return Vec2(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, k: N) -> "Vec2":
        if not isinstance(k, Number):
            return NotImplemented
        return Vec2(k * self.x, k * self.y)

    def __truediv__(self, other: "N | Vec2") -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(scalar.divide(self.x, other.x), scalar.divide(self.y, other.y))
        if isinstance(other, Number):
            return Vec2(scalar.divide(self.x, other), scalar.divide(self.y, other))
        return NotImplemented

    def __rtruediv__(self, k: N) -> "Vec2":
        if not isinstance(k, Number):
            return NotImplemented
        return Vec2(scalar.divide(k, self.x), scalar.divide(k, self.y))

    def __eq__(self, other: object) -> bool:
        # Componentwise so NaN never equals itself.
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[N]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def dot(self, other: "Vec2") -> N:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> N:
        return self.x**2 + self.y**2

    def length(self) -> N:
        return scalar.sqrt(self.length_squared())

    def distance(self, other: "Vec2") -> N:
        return (self - other).length()

    def normal(self) -> "Vec2":
        """Left-hand perpendicular (-y, x); not a unit vector."""
        return Vec2(-self.y, self.x)

    def normalize(self) -> "Vec2":
        return self / self.length()

    def abs(self) -> "Vec2":
        return Vec2(abs(self.x), abs(self.y))

    __abs__ = abs

    def set(self, x: N, y: N) -> None:
        self.x = x
        self.y = y

    def copy(self) -> "Vec2":
        return Vec2(self.x, self.y)

    def to_tuple(self) -> tuple[N, N]:
        return (self.x, self.y)

    def to_array(self, dtype=config.DEFAULT_ARRAY_DTYPE) -> np.ndarray:
        return np.array((self.x, self.y), dtype=dtype)

    def is_close(
        self,
        other: "Vec2",
        rel_tol: float = config.DEFAULT_REL_TOL,
        abs_tol: float = config.DEFAULT_ABS_TOL,
    ) -> bool:
        """Componentwise ``math.isclose`` against another vector."""
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )
