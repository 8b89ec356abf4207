import pytest

from planegfx.vec2 import FLOAT_EPSILON
from planegfx.vec3 import (
    Vec3,
    angle_between,
    cross_product,
    distance_between,
    dot_product,
    magnitude,
    magnitude_squared,
    normalize,
)

E = FLOAT_EPSILON


def assert_vec(result, x, y, z, tol=E):
    assert result.x == pytest.approx(x, abs=tol)
    assert result.y == pytest.approx(y, abs=tol)
    assert result.z == pytest.approx(z, abs=tol)


def test_default_constructor():
    v = Vec3()
    assert (v.x, v.y, v.z) == (0.0, 0.0, 0.0)


def test_three_parameter_constructor():
    v = Vec3(1.0, 2.0, 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)


def test_repeated_value_constructor():
    v = Vec3.splat(1.0)
    assert (v.x, v.y, v.z) == (1.0, 1.0, 1.0)


V1 = Vec3(1.0, 2.0, 3.0)
V2 = Vec3(4.0, 5.0, 6.0)


def test_add():
    assert_vec(V1 + V2, 5.0, 7.0, 9.0)


def test_sub():
    assert_vec(V1 - V2, -3.0, -3.0, -3.0)


def test_mul():
    assert_vec(V1 * 5.0, 5.0, 10.0, 15.0)


def test_rmul_matches_mul():
    assert 5.0 * V1 == V1 * 5.0


def test_div():
    assert_vec(V1 / 2.0, 0.5, 1.0, 1.5)


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3(1.0, 2.0, 3.0) / 0


def test_add_assign():
    result = Vec3.splat(0.0)
    result += Vec3(2.0, 3.0, 5.0)
    assert_vec(result, 2.0, 3.0, 5.0)


def test_sub_assign():
    result = Vec3.splat(0.0)
    result -= Vec3(2.0, 3.0, 5.0)
    assert_vec(result, -2.0, -3.0, -5.0)


def test_mul_assign():
    v = Vec3(2.0, 3.0, 5.0)
    v *= 2.0
    assert_vec(v, 4.0, 6.0, 10.0)


def test_div_assign():
    v = Vec3(2.0, 3.0, 5.0)
    v /= 2.0
    assert_vec(v, 1.0, 1.5, 2.5)


def test_negate():
    assert_vec(-Vec3(2.0, 3.0, 1.0), -2.0, -3.0, -1.0)


def test_equal():
    assert (Vec3(2.0, 3.0, 1.0) == Vec3(2.0, 3.0, 1.0)) is True


def test_not_equal():
    assert (Vec3(2.0, 3.0, 1.0) != Vec3(2.0, 1.0, 3.0)) is True


A = Vec3(1.0, 2.0, 3.0)
B = Vec3(6.0, 5.0, 4.0)


def test_dot_product():
    assert dot_product(A, B) == pytest.approx(28.0, abs=E)


def test_cross_product():
    assert_vec(cross_product(A, B), -7.0, 14.0, -7.0)


def test_cross_product_is_orthogonal():
    c = cross_product(A, B)
    assert dot_product(c, A) == pytest.approx(0.0)
    assert dot_product(c, B) == pytest.approx(0.0)


def test_cross_product_anticommutes():
    assert cross_product(A, B) == -cross_product(B, A)


def test_magnitude_squared():
    assert magnitude_squared(A) == pytest.approx(14.0, abs=E)


def test_magnitude():
    assert magnitude(A) == pytest.approx(3.741657386773941, abs=E)


def test_distance_between():
    assert distance_between(A, B) == pytest.approx(5.916079783099616, abs=E)


def test_angle_between():
    assert angle_between(A, B) == pytest.approx(0.549467244757627, abs=E)


def test_angle_between_zero_vector_raises():
    with pytest.raises(ValueError):
        angle_between(Vec3(), A)


def test_normalize():
    assert_vec(normalize(A), 0.2672612419124244, 0.534522483824848, 0.8017837257372732)


def test_normalize_has_unit_length():
    assert magnitude(normalize(B)) == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ValueError):
        normalize(Vec3())