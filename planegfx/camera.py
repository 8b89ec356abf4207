"""A 2D camera with a position and an orientation."""

from __future__ import annotations

from dataclasses import dataclass, field

from planegfx.mat3 import Mat3, transpose
from planegfx.vec2 import Vec2, dot_product, normalize, rotate_by


@dataclass
class Camera:
    """A camera described by its centre and its up and right axes."""

    center: Vec2 = field(default_factory=Vec2)
    _up: Vec2 = field(default_factory=lambda: Vec2(0.0, 1.0), init=False, repr=False)
    _right: Vec2 = field(default_factory=lambda: Vec2(1.0, 0.0), init=False, repr=False)

    @property
    def up(self) -> Vec2:
        """The camera's up axis."""
        return Vec2(self._up.x, self._up.y)

    @property
    def right(self) -> Vec2:
        """The camera's right axis."""
        return Vec2(self._right.x, self._right.y)

    def reset_up(self, camera_up: Vec2 | None = None) -> None:
        """Point the camera's up axis along ``camera_up`` (default: +y)."""
        if camera_up is None:
            camera_up = Vec2(0.0, 1.0)
        self._up = Vec2(camera_up.x, camera_up.y)
        self._right = Vec2(self._up.y, -self._up.x)

    def move_up(self, distance: float) -> None:
        """Move the camera along its up axis."""
        self.center = self.center + normalize(self._up) * distance

    def move_right(self, distance: float) -> None:
        """Move the camera along its right axis."""
        self.center = self.center + normalize(self._right) * distance

    def rotate(self, angle_in_radians: float) -> None:
        """Rotate the camera's axes by the given angle."""
        self._up = rotate_by(angle_in_radians, self._up)
        self._right = rotate_by(angle_in_radians, self._right)

    def camera_to_world(self) -> Mat3:
        """Return the camera-to-world matrix."""
        up, right, center = self._up, self._right, self.center
        up_dot = dot_product(-up, center)
        right_dot = dot_product(-right, center)
        inverse = Mat3(
            up.y, -right.y, right.y * up_dot - right_dot * up.y,
            -up.x, right.x, right_dot * up.x - right.x * up_dot,
            0.0, 0.0, 1.0,
        )
        return transpose(inverse)

    def world_to_camera(self) -> Mat3:
        """Return the world-to-camera matrix."""
        up, right, center = self._up, self._right, self.center
        return Mat3(
            right.x, up.x, 0.0,
            right.y, up.y, 0.0,
            dot_product(right, center), dot_product(up, center), 1.0,
        )