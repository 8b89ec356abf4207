"""Input events and a handler that keeps track of basic input state."""

from __future__ import annotations

from enum import Enum, auto


class KeyboardButton(Enum):
    """Keys that the window reports."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    PAGE_DOWN = auto()
    PAGE_UP = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()


class MouseButton(Enum):
    """Mouse button transitions that the window reports."""

    LEFT_PRESS = auto()
    LEFT_RELEASE = auto()


class EventHandler:
    """Receives window events; subclasses override the ones they care about.

    The default callbacks remember the input state they see: which keys are
    held, where the cursor is, whether the left mouse button is down and
    whether the window has been asked to close.
    """

    @property
    def pressed_keys(self) -> frozenset[KeyboardButton]:
        """Keys currently held down."""
        return frozenset(getattr(self, "_pressed_keys", ()))

    @property
    def cursor_position(self) -> tuple[float, float]:
        """Last reported cursor position."""
        return getattr(self, "_cursor_position", (0.0, 0.0))

    @property
    def left_button_down(self) -> bool:
        """Whether the left mouse button is held down."""
        return getattr(self, "_left_button_down", False)

    @property
    def close_requested(self) -> bool:
        """Whether the window has been asked to close."""
        return getattr(self, "_close_requested", False)

    def _held_keys(self) -> set[KeyboardButton]:
        keys = getattr(self, "_pressed_keys", None)
        if keys is None:
            keys = set()
            self._pressed_keys = keys
        return keys

    def handle_key_press(self, button: KeyboardButton) -> None:
        """Called when a key is pressed."""
        self._held_keys().add(button)

    def handle_key_release(self, button: KeyboardButton) -> None:
        """Called when a key is released."""
        self._held_keys().discard(button)

    def handle_resize_event(self, width: int, height: int) -> None:
        """Called when the window is resized."""

    def handle_scroll_event(self, scroll_amount: float) -> None:
        """Called when the mouse wheel scrolls."""

    def handle_mouse_position_event(self, xpos: float, ypos: float) -> None:
        """Called when the cursor moves."""
        self._cursor_position = (float(xpos), float(ypos))

    def handle_mouse_event(self, button: MouseButton) -> None:
        """Called when a mouse button changes state."""
        self._left_button_down = button is MouseButton.LEFT_PRESS

    def handle_window_close(self) -> None:
        """Called when the window is asked to close."""
        self._close_requested = True

    def handle_focus_event(self, focused: bool) -> None:
        """Called when the window gains or loses focus."""