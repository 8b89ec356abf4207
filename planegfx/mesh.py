"""Meshes of points, colours and texture coordinates, and shape builders."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

from planegfx.angle import TWO_PI
from planegfx.color import Color4f
from planegfx.vec2 import Vec2


class ShapePattern(Enum):
    """How a mesh's points are assembled into primitives."""

    LINE = auto()
    TRIANGLES = auto()
    TRIANGLE_STRIP = auto()
    TRIANGLE_FAN = auto()
    QUADS = auto()


def _default_color() -> Color4f:
    return Color4f.gray(0.0)


def _as_vec2(x: float | Vec2, y: float | None) -> Vec2:
    if isinstance(x, Vec2):
        if y is not None:
            raise TypeError("pass either a Vec2 or two numbers")
        return Vec2(x.x, x.y)
    if y is None:
        raise TypeError("a second coordinate is required")
    return Vec2(float(x), float(y))


@dataclass
class Mesh:
    """Per-vertex data and the pattern used to draw it."""

    points: list[Vec2] = field(default_factory=list)
    colors: list[Color4f] = field(default_factory=list)
    texture_coordinates: list[Vec2] = field(default_factory=list)
    pattern: ShapePattern = ShapePattern.TRIANGLES

    def add_point(self, x: float | Vec2, y: float | None = None) -> None:
        """Append a point, given as a ``Vec2`` or as two numbers."""
        self.points.append(_as_vec2(x, y))

    def add_color(self, color: Color4f) -> None:
        """Append a vertex colour."""
        self.colors.append(color)

    def add_texture_coordinate(self, u: float | Vec2, v: float | None = None) -> None:
        """Append a texture coordinate, given as a ``Vec2`` or as two numbers."""
        self.texture_coordinates.append(_as_vec2(u, v))

    def __len__(self) -> int:
        return len(self.points)


def create_ellipse(pos: Vec2, radius: Vec2, points_num: int, color: Color4f | None = None) -> Mesh:
    """Build a triangle-fan ellipse with ``points_num + 1`` rim points."""
    if points_num < 1:
        raise ValueError("an ellipse needs at least one segment")
    color = color if color is not None else _default_color()
    mesh = Mesh(pattern=ShapePattern.TRIANGLE_FAN)
    step = TWO_PI / points_num
    for i in range(points_num + 1):
        mesh.add_point(pos.x + radius.x * math.cos(i * step), pos.y + radius.y * math.sin(i * step))
        mesh.add_color(color)
    return mesh


def create_rectangle(pos: Vec2, size: Vec2, color: Color4f | None = None) -> Mesh:
    """Build a rectangle centred on ``pos`` with texture coordinates."""
    color = color if color is not None else _default_color()
    mesh = Mesh(pattern=ShapePattern.TRIANGLE_FAN)
    x_half = size.x / 2.0
    y_half = size.y / 2.0
    corners = [(-x_half, -y_half), (-x_half, y_half), (x_half, y_half), (x_half, -y_half)]
    for dx, dy in corners:
        mesh.add_point(dx + pos.x, dy + pos.y)
        mesh.add_color(color)
    for u, v in ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)):
        mesh.add_texture_coordinate(u, v)
    return mesh


def _offset_shape(pattern: ShapePattern, pos: Vec2, offsets: tuple[Vec2, ...], color: Color4f | None) -> Mesh:
    color = color if color is not None else _default_color()
    mesh = Mesh(pattern=pattern)
    for offset in offsets:
        mesh.add_point(pos + offset)
    for _ in offsets:
        mesh.add_color(color)
    return mesh


def create_quad(
    pos: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, p4: Vec2, color: Color4f | None = None
) -> Mesh:
    """Build a quad from four offsets relative to ``pos``."""
    return _offset_shape(ShapePattern.QUADS, pos, (p1, p2, p3, p4), color)


def create_line(pos: Vec2, p1: Vec2, p2: Vec2, color: Color4f | None = None) -> Mesh:
    """Build a line from two offsets relative to ``pos``."""
    return _offset_shape(ShapePattern.LINE, pos, (p1, p2), color)


def create_triangle(pos: Vec2, p1: Vec2, p2: Vec2, p3: Vec2, color: Color4f | None = None) -> Mesh:
    """Build a triangle from three offsets relative to ``pos``."""
    return _offset_shape(ShapePattern.TRIANGLES, pos, (p1, p2, p3), color)