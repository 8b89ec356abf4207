"""Column-major 3x3 matrices and 2D affine transform builders."""

from __future__ import annotations

import math

from planegfx.vec2 import FLOAT_EPSILON
from planegfx.vec3 import Vec3


def _check_index(key: tuple[int, int]) -> tuple[int, int]:
    try:
        col, row = key
    except (TypeError, ValueError):
        raise TypeError("matrix index must be a (column, row) pair") from None
    if not (0 <= col <= 2 and 0 <= row <= 2):
        raise IndexError(f"matrix index out of range: ({col}, {row})")
    return col, row


class Mat3:
    """A 3x3 matrix stored by columns; ``m[col, row]`` reads one element.

    ``Mat3()`` is all zeros, ``Mat3(v)`` repeats ``v`` in every element,
    ``Mat3(c0, c1, c2)`` takes three ``Vec3`` columns and ``Mat3(a, ..., i)``
    takes nine numbers, column by column.
    """

    __slots__ = ("_columns",)

    def __init__(self, *args: float | Vec3) -> None:
        if not args:
            self._columns = [[0.0] * 3 for _ in range(3)]
        elif len(args) == 1:
            value = float(args[0])  # type: ignore[arg-type]
            self._columns = [[value] * 3 for _ in range(3)]
        elif len(args) == 3 and all(isinstance(a, Vec3) for a in args):
            self._columns = [[c.x, c.y, c.z] for c in args]  # type: ignore[union-attr]
        elif len(args) == 9:
            values = [float(a) for a in args]  # type: ignore[arg-type]
            self._columns = [values[start:start + 3] for start in (0, 3, 6)]
        else:
            raise TypeError(
                "Mat3 takes no arguments, one value, three Vec3 columns or nine numbers"
            )

    @classmethod
    def from_columns(cls, column0: Vec3, column1: Vec3, column2: Vec3) -> Mat3:
        """Build a matrix from three column vectors."""
        return cls(column0, column1, column2)

    @classmethod
    def filled(cls, value: float) -> Mat3:
        """Build a matrix with every element equal to ``value``."""
        return cls(value)

    @classmethod
    def identity(cls) -> Mat3:
        """Return the identity matrix."""
        return cls(1, 0, 0, 0, 1, 0, 0, 0, 1)

    def column(self, index: int) -> Vec3:
        """Return a copy of one column as a ``Vec3``."""
        if not 0 <= index <= 2:
            raise IndexError(f"column index out of range: {index}")
        return Vec3(*self._columns[index])

    def __getitem__(self, key: tuple[int, int]) -> float:
        col, row = _check_index(key)
        return self._columns[col][row]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        col, row = _check_index(key)
        self._columns[col][row] = float(value)

    def __mul__(self, other: Mat3) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        a, b = self._columns, other._columns
        result = Mat3()
        result._columns = [
            [sum(a[k][row] * b[col][k] for k in range(3)) for row in range(3)]
            for col in range(3)
        ]
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return all(
            abs(x - y) <= FLOAT_EPSILON
            for mine, theirs in zip(self._columns, other._columns)
            for x, y in zip(mine, theirs)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Mat3({', '.join(repr(v) for col in self._columns for v in col)})"


def build_translation(translate_x: float, translate_y: float | None = None) -> Mat3:
    """Return a translation matrix; one argument moves both axes equally."""
    if translate_y is None:
        translate_y = translate_x
    return Mat3(1, 0, 0, 0, 1, 0, translate_x, translate_y, 1)


def build_rotation(angle_in_radians: float) -> Mat3:
    """Return the rotation matrix for the given angle."""
    c = math.cos(angle_in_radians)
    s = math.sin(angle_in_radians)
    return Mat3(c, -s, 0, s, c, 0, 0, 0, 1)


def build_scaling(scale_x: float, scale_y: float | None = None) -> Mat3:
    """Return a scaling matrix; one argument scales both axes equally."""
    if scale_y is None:
        scale_y = scale_x
    return Mat3(scale_x, 0, 0, 0, scale_y, 0, 0, 0, 1)


def transpose(m: Mat3) -> Mat3:
    """Return the transpose of ``m``."""
    return Mat3(*(m[col, row] for row in range(3) for col in range(3)))