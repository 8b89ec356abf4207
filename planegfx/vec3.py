"""Three-component vectors and the operations on them."""

from __future__ import annotations

import math
from dataclasses import dataclass

from planegfx.vec2 import FLOAT_EPSILON


@dataclass(eq=False, slots=True)
class Vec3:
    """A 3D vector with ``x``, ``y`` and ``z`` components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: float) -> Vec3:
        """Build a vector whose components all equal ``value``."""
        return cls(value, value, value)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> Vec3:
        if isinstance(scale, Vec3):
            return NotImplemented
        return Vec3(self.x * scale, self.y * scale, self.z * scale)

    def __rmul__(self, scale: float) -> Vec3:
        return self.__mul__(scale)

    def __truediv__(self, divisor: float) -> Vec3:
        if isinstance(divisor, Vec3):
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("cannot divide a vector by zero")
        return Vec3(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return (
            abs(self.x - other.x) <= FLOAT_EPSILON
            and abs(self.y - other.y) <= FLOAT_EPSILON
            and abs(self.z - other.z) <= FLOAT_EPSILON
        )

    __hash__ = None  # type: ignore[assignment]


def dot_product(v1: Vec3, v2: Vec3) -> float:
    """Return the dot product of two vectors."""
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def cross_product(v1: Vec3, v2: Vec3) -> Vec3:
    """Return the cross product ``v1 x v2``."""
    return Vec3(
        v1.y * v2.z - v1.z * v2.y,
        v1.z * v2.x - v1.x * v2.z,
        v1.x * v2.y - v1.y * v2.x,
    )


def magnitude_squared(v: Vec3) -> float:
    """Return the squared length of ``v``."""
    return dot_product(v, v)


def magnitude(v: Vec3) -> float:
    """Return the length of ``v``."""
    return math.sqrt(magnitude_squared(v))


def distance_between(v1: Vec3, v2: Vec3) -> float:
    """Return the distance between two points."""
    return math.sqrt(magnitude_squared(v1 - v2))


def angle_between(v1: Vec3, v2: Vec3) -> float:
    """Return the angle between two vectors, in radians."""
    mag1 = magnitude(v1)
    mag2 = magnitude(v2)
    if mag1 == 0 or mag2 == 0:
        raise ValueError("angle is undefined for a zero-length vector")
    return math.acos(dot_product(v1, v2) / (mag1 * mag2))


def normalize(v: Vec3) -> Vec3:
    """Return the unit vector pointing the same way as ``v``."""
    mag = magnitude(v)
    if mag == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / mag