import pytest

from planegfx.angle import PI
from planegfx.camera import Camera
from planegfx.mat3 import Mat3
from planegfx.vec2 import Vec2


def test_default_camera_is_identity():
    camera = Camera()
    assert camera.world_to_camera() == Mat3.identity()
    assert camera.camera_to_world() == Mat3.identity()
    assert camera.up == Vec2(0.0, 1.0)
    assert camera.right == Vec2(1.0, 0.0)


def test_rotate_quarter_turn():
    camera = Camera()
    camera.rotate(PI / 2)
    assert camera.up == Vec2(-1.0, 0.0)
    assert camera.right == Vec2(0.0, 1.0)


def test_reset_up_restores_default():
    camera = Camera()
    camera.rotate(1.2)
    camera.reset_up()
    assert camera.up == Vec2(0.0, 1.0)
    assert camera.right == Vec2(1.0, 0.0)


def test_reset_up_with_custom_axis():
    camera = Camera()
    camera.reset_up(Vec2(1.0, 0.0))
    assert camera.up == Vec2(1.0, 0.0)
    assert camera.right == Vec2(0.0, -1.0)


def test_move_up_and_right():
    camera = Camera()
    camera.move_up(5.0)
    assert camera.center == Vec2(0.0, 5.0)
    camera.move_right(3.0)
    assert camera.center == Vec2(3.0, 5.0)


def test_world_to_camera_carries_translation():
    camera = Camera()
    camera.move_right(3.0)
    m = camera.world_to_camera()
    assert m[2, 0] == pytest.approx(3.0)
    assert m[2, 1] == pytest.approx(0.0)
    assert m[2, 2] == 1.0


def test_rotation_matrices_are_inverse():
    camera = Camera()
    camera.rotate(0.7)
    assert camera.world_to_camera() * camera.camera_to_world() == Mat3.identity()


def test_move_with_zero_axis_raises():
    camera = Camera()
    camera.reset_up(Vec2(0.0, 0.0))
    with pytest.raises(ValueError):
        camera.move_up(1.0)