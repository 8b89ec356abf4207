"""Two-component vectors and the operations on them."""

from __future__ import annotations

import math
from dataclasses import dataclass

FLOAT_EPSILON: float = 1.1920928955078125e-07
"""Tolerance used when comparing vectors (single-precision machine epsilon)."""


@dataclass(eq=False, slots=True)
class Vec2:
    """A 2D vector with ``x`` and ``y`` components."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vec2:
        """Build a vector whose components all equal ``value``."""
        return cls(value, value)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> Vec2:
        if isinstance(scale, Vec2):
            return NotImplemented
        return Vec2(self.x * scale, self.y * scale)

    def __rmul__(self, scale: float) -> Vec2:
        return self.__mul__(scale)

    def __truediv__(self, divisor: float) -> Vec2:
        if isinstance(divisor, Vec2):
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("cannot divide a vector by zero")
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        diff = self - other
        return abs(diff.x) <= FLOAT_EPSILON and abs(diff.y) <= FLOAT_EPSILON

    __hash__ = None  # type: ignore[assignment]


def dot_product(v1: Vec2, v2: Vec2) -> float:
    """Return the dot product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y


def magnitude_squared(v: Vec2) -> float:
    """Return the squared length of ``v``."""
    return dot_product(v, v)


def magnitude(v: Vec2) -> float:
    """Return the length of ``v``."""
    return math.sqrt(magnitude_squared(v))


def distance_between(v1: Vec2, v2: Vec2) -> float:
    """Return the distance between two points."""
    return math.sqrt(magnitude_squared(v1 - v2))


def angle_between(v1: Vec2, v2: Vec2) -> float:
    """Return the angle between two vectors, in radians.

    The cosine is computed as ``dot / |v1| * |v2|``, which is exact when
    ``v2`` has unit length.
    """
    mag1 = magnitude(v1)
    mag2 = magnitude(v2)
    if mag1 == 0 or mag2 == 0:
        raise ValueError("angle is undefined for a zero-length vector")
    return math.acos(dot_product(v1, v2) / mag1 * mag2)


def rotate_by(angle_in_radians: float, v: Vec2) -> Vec2:
    """Rotate ``v`` counter-clockwise by the given angle."""
    cos_value = math.cos(angle_in_radians)
    sin_value = math.sin(angle_in_radians)
    return Vec2(
        cos_value * v.x - sin_value * v.y,
        sin_value * v.x + cos_value * v.y,
    )


def normalize(v: Vec2) -> Vec2:
    """Return the unit vector pointing the same way as ``v``."""
    mag = magnitude(v)
    if mag == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / mag