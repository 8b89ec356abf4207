import math

import pytest

from planegfx.angle import PI
from planegfx.vec2 import (
    FLOAT_EPSILON,
    Vec2,
    angle_between,
    distance_between,
    dot_product,
    magnitude,
    magnitude_squared,
    normalize,
    rotate_by,
)

E = FLOAT_EPSILON


def assert_vec(result, x, y, tol=E):
    assert result.x == pytest.approx(x, abs=tol)
    assert result.y == pytest.approx(y, abs=tol)


def test_default_constructor():
    v = Vec2()
    assert (v.x, v.y) == (0.0, 0.0)


def test_two_parameter_constructor():
    v = Vec2(1.0, 2.0)
    assert (v.x, v.y) == (1.0, 2.0)


def test_repeated_value_constructor():
    v = Vec2.splat(1.0)
    assert (v.x, v.y) == (1.0, 1.0)


V1 = Vec2(1.3, 3.2)
V2 = Vec2(2.2, 6.5)


def test_add():
    assert_vec(V1 + V2, 3.5, 9.7)


def test_sub():
    assert_vec(V1 - V2, -0.9, -3.3)


def test_mul():
    assert_vec(V1 * 5.0, 6.5, 16.0)


def test_rmul_matches_mul():
    assert 5.0 * V1 == V1 * 5.0


def test_div():
    assert_vec(V1 / 2.0, 0.65, 1.6)


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1.3, 3.2) / 0.0


def test_add_assign():
    result = Vec2.splat(0.0)
    result += Vec2(0.8, 1.3)
    assert_vec(result, 0.8, 1.3)


def test_sub_assign():
    result = Vec2.splat(0.0)
    result -= Vec2(0.8, 1.3)
    assert_vec(result, -0.8, -1.3)


def test_mul_assign():
    v = Vec2(0.8, 1.3)
    v *= 2.0
    assert_vec(v, 1.6, 2.6)


def test_div_assign():
    v = Vec2(0.8, 1.3)
    v /= 2.0
    assert_vec(v, 0.4, 0.65)


def test_negate():
    assert_vec(-Vec2(1.3, 1.0), -1.3, -1.0)


def test_equal():
    assert (Vec2(1.3, 1.0) == Vec2(1.3, 1.0)) is True


def test_not_equal():
    assert (Vec2(1.3, 1.0) != Vec2(1.3, 2.0)) is True


def test_equality_tolerates_epsilon():
    assert Vec2(1.0, 1.0) == Vec2(1.0 + E / 2, 1.0 - E / 2)


def test_equality_with_other_type_is_false():
    assert (Vec2(1.0, 2.0) == (1.0, 2.0)) is False


A = Vec2(1.2, 1.5)
B = Vec2(0.8, 1.3)


def test_dot_product():
    assert dot_product(A, B) == pytest.approx(2.91, abs=E * 2)


def test_magnitude_squared():
    assert magnitude_squared(A) == pytest.approx(3.69, abs=E)


def test_magnitude():
    assert magnitude(A) == pytest.approx(1.920937271229855, abs=E)


def test_distance_between():
    assert distance_between(A, B) == pytest.approx(0.4472135954999579, abs=E)


def test_distance_is_symmetric():
    assert distance_between(A, B) == pytest.approx(distance_between(B, A))


def test_angle_between():
    assert angle_between(Vec2(1.0, 1.0), Vec2(0.0, 1.0)) == pytest.approx(PI / 4, abs=E)


def test_angle_between_zero_vector_raises():
    with pytest.raises(ValueError):
        angle_between(Vec2(), Vec2(1.0, 0.0))


def test_rotate_by():
    assert_vec(rotate_by(PI, A), -1.2, -1.5, tol=1e-6)


def test_rotate_round_trip():
    assert rotate_by(-0.7, rotate_by(0.7, A)) == A


def test_normalize():
    assert_vec(normalize(A), 0.6246950475544241, 0.7808688094430302)


def test_normalize_has_unit_length():
    assert magnitude(normalize(Vec2(-3.0, 7.0))) == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        normalize(Vec2())


def test_rotation_preserves_length():
    assert magnitude(rotate_by(1.234, A)) == pytest.approx(magnitude(A))


def test_vectors_are_unhashable():
    with pytest.raises(TypeError):
        hash(Vec2(1.0, 2.0))


def test_magnitude_matches_hypot():
    assert magnitude(A) == pytest.approx(math.hypot(A.x, A.y))