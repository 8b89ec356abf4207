"""Base class for interactive demos with a camera and zoomable view."""

from __future__ import annotations

from abc import ABC, abstractmethod

from planegfx.camera import Camera
from planegfx.camera_view import CameraView
from planegfx.events import EventHandler

ZOOM_SPEED = 0.05
MIN_ZOOM = 0.1
MAX_ZOOM = 2.0


class Demo(EventHandler, ABC):
    """A demo scene that owns a camera and a view of the given size."""

    def __init__(self, width: int, height: int) -> None:
        self.camera = Camera()
        self.view = CameraView()
        self.width = width
        self.height = height
        self.is_focused = True
        self.initialize()

    @abstractmethod
    def initialize(self) -> None:
        """Set up the scene; called once on construction."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the scene by ``dt`` seconds."""

    @abstractmethod
    def reset_camera(self) -> None:
        """Return the camera to its starting orientation."""

    def handle_resize_event(self, width: int, height: int) -> None:
        self.view.set_view_size(width, height)

    def handle_scroll_event(self, scroll_amount: float) -> None:
        new_zoom = self.view.zoom + scroll_amount * ZOOM_SPEED
        self.view.zoom = min(max(new_zoom, MIN_ZOOM), MAX_ZOOM)

    def handle_focus_event(self, focused: bool) -> None:
        self.is_focused = focused