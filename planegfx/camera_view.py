"""Camera-space to normalised-device-coordinate transforms."""

from __future__ import annotations

from enum import Enum, auto

from planegfx.mat3 import Mat3
from planegfx.vec2 import Vec2


class FrameOfReference(Enum):
    """Where the origin of camera space sits and which way y points."""

    RIGHT_HANDED_ORIGIN_CENTER = auto()
    RIGHT_HANDED_ORIGIN_BOTTOM_LEFT = auto()
    LEFT_HANDED_ORIGIN_TOP_LEFT = auto()
    NORMALIZE = auto()


def build_to_ndc(frame_of_reference: FrameOfReference, zoom: float, window_size: Vec2) -> Mat3:
    """Build the matrix that maps camera space to NDC for a window size."""
    if frame_of_reference is FrameOfReference.NORMALIZE:
        return Mat3.identity()
    sx = zoom * (2.0 / window_size.x)
    sy = zoom * (2.0 / window_size.y)
    if frame_of_reference is FrameOfReference.RIGHT_HANDED_ORIGIN_CENTER:
        return Mat3(sx, 0.0, 0.0, 0.0, sy, 0.0, 0.0, 0.0, 1.0)
    if frame_of_reference is FrameOfReference.RIGHT_HANDED_ORIGIN_BOTTOM_LEFT:
        return Mat3(sx, 0.0, 0.0, 0.0, sy, 0.0, -1.0, -1.0, 1.0)
    return Mat3(sx, 0.0, 0.0, 0.0, -sy, 0.0, -1.0, 1.0, 1.0)


class CameraView:
    """The viewport size, zoom and frame of reference of a camera."""

    def __init__(self) -> None:
        self._display_size = Vec2()
        self._zoom = 1.0
        self._frame_of_reference = FrameOfReference.RIGHT_HANDED_ORIGIN_CENTER
        self._camera_to_ndc = Mat3.identity()

    @property
    def camera_to_ndc(self) -> Mat3:
        """The current camera-to-NDC matrix (identity until a size is set)."""
        return self._camera_to_ndc

    @property
    def display_size(self) -> Vec2:
        """The viewport size in pixels."""
        return Vec2(self._display_size.x, self._display_size.y)

    @property
    def zoom(self) -> float:
        return self._zoom

    @zoom.setter
    def zoom(self, new_zoom: float) -> None:
        self._zoom = float(new_zoom)
        self._rebuild()

    @property
    def frame_of_reference(self) -> FrameOfReference:
        return self._frame_of_reference

    @frame_of_reference.setter
    def frame_of_reference(self, frame_of_reference: FrameOfReference) -> None:
        self._frame_of_reference = FrameOfReference(frame_of_reference)
        self._rebuild()

    def set_view_size(self, width: float | Vec2, height: float | None = None) -> None:
        """Set the viewport size, as two numbers or as one ``Vec2``."""
        if isinstance(width, Vec2):
            if height is not None:
                raise TypeError("pass either a Vec2 or a width and a height")
            self._display_size = Vec2(width.x, width.y)
        else:
            if height is None:
                raise TypeError("a height is required with a numeric width")
            self._display_size = Vec2(float(width), float(height))
        self._rebuild()

    def _rebuild(self) -> None:
        size = self._display_size
        sized = size.x != 0 and size.y != 0
        if sized or self._frame_of_reference is FrameOfReference.NORMALIZE:
            self._camera_to_ndc = build_to_ndc(self._frame_of_reference, self._zoom, size)