import pytest

from planegfx.demo import Demo
from planegfx.events import KeyboardButton
from planegfx.vec2 import Vec2


class _SampleDemo(Demo):
    def initialize(self):
        self.initialized = True
        self.elapsed = 0.0
        self.view.set_view_size(self.width, self.height)

    def update(self, dt):
        self.elapsed += dt

    def reset_camera(self):
        self.camera.reset_up()


def test_demo_is_abstract():
    with pytest.raises(TypeError):
        Demo(100, 100)


def test_construction_initializes():
    demo = _SampleDemo(1280, 720)
    assert demo.initialized is True
    assert demo.is_focused is True
    assert demo.view.display_size == Vec2(1280.0, 720.0)


def test_resize_updates_view():
    demo = _SampleDemo(1280, 720)
    demo.handle_resize_event(800, 600)
    assert demo.view.display_size == Vec2(800.0, 600.0)


def test_scroll_changes_zoom():
    demo = _SampleDemo(1280, 720)
    Demo.handle_scroll_event(demo, 1.0)
    assert demo.view.zoom == pytest.approx(1.05)


@pytest.mark.parametrize("amount, expected", [(100.0, 2.0), (-100.0, 0.1)])
def test_scroll_is_clamped(amount, expected):
    demo = _SampleDemo(1280, 720)
    Demo.handle_scroll_event(demo, amount)
    assert demo.view.zoom == pytest.approx(expected)


def test_focus_event():
    demo = _SampleDemo(640, 480)
    Demo.handle_focus_event(demo, False)
    assert demo.is_focused is False
    Demo.handle_focus_event(demo, True)
    assert demo.is_focused is True


def test_unhandled_key_is_ignored_and_update_runs():
    demo = _SampleDemo(640, 480)
    assert Demo.handle_key_press(demo, KeyboardButton.A) is None
    demo.update(0.5)
    demo.update(0.25)
    assert demo.elapsed == pytest.approx(0.75)


def test_reset_camera_restores_up():
    demo = _SampleDemo(640, 480)
    demo.camera.rotate(0.9)
    demo.reset_camera()
    assert demo.camera.up == Vec2(0.0, 1.0)