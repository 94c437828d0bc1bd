"""Algebraic properties checked in both element precisions, including extreme magnitudes."""
from __future__ import annotations

import math
import warnings

import numpy as np
import pytest

from vexel import FLOAT32, FLOAT64, Vector2, Vector3, Vector4
from vexel.errors import DegenerateVector, DivisionByZero, InvalidOperation

PRECISIONS = pytest.mark.parametrize("precision", [FLOAT32, FLOAT64], ids=["float32", "float64"])


# //1.- Build the shared sample triple in the requested precision.
def _samples(precision):
    return (
        Vector3.from_iter((1.5, -2.25, 3.0), precision),
        Vector3.from_iter((-4.0, 0.1, 7.25), precision),
        Vector3.from_iter((0.3, 0.2, -0.7), precision),
    )


@PRECISIONS
def test_addition_and_dot(precision) -> None:
    a, b, c = _samples(precision)
    assert a + b == b + a
    assert ((a + b) + c).approx_eq(a + (b + c))
    assert a.dot(b) == b.dot(a)
    assert type(a.dot(b)) is precision.scalar_type


@PRECISIONS
def test_cross_anti_commutes(precision) -> None:
    a, b, _ = _samples(precision)
    assert a.cross(b).approx_eq(b.cross(a).scale(-1.0))
    x = Vector3.unit_x(precision)
    y = Vector3.unit_y(precision)
    assert x.cross(y) == Vector3.unit_z(precision)


@PRECISIONS
def test_normalize_and_length(precision) -> None:
    for v in _samples(precision):
        assert abs(v.normalize().length() - precision.one()) < precision.epsilon()
    assert Vector2.from_iter((3, 4), precision).length() == 5.0
    with pytest.raises(DegenerateVector):
        Vector3.zero(precision).normalize()


@PRECISIONS
def test_lerp(precision) -> None:
    a, b, _ = _samples(precision)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0).approx_eq(b)
    assert a.lerp(a, 0.75) == a
    assert a.lerp_clamped(b, 3.0).approx_eq(b)
    midpoint = Vector2.zero(precision).lerp(Vector2.from_iter((10, 10), precision), 0.5)
    assert midpoint == Vector2.from_iter((5, 5), precision)


@PRECISIONS
def test_project_reject_and_angle(precision) -> None:
    a, b, c = _samples(precision)
    for source, target in ((a, b), (b, c), (c, a)):
        assert (source.project(target) + source.reject(target)).approx_eq(source)
        assert source.angle_between(source) == pytest.approx(0.0, abs=float(precision.epsilon()))
    right = Vector4.unit_x(precision).angle_between(Vector4.unit_w(precision))
    assert right == pytest.approx(math.pi / 2, abs=float(precision.epsilon()))
    assert type(right) is precision.scalar_type


@PRECISIONS
def test_swizzle_and_conversion_round_trips(precision) -> None:
    a, _, _ = _samples(precision)
    assert a.swizzle(0, 1, 2) == a
    assert a.extend(9.0).truncate() == a
    assert a.truncate().extend(a.z) == a


@PRECISIONS
def test_division_variants(precision) -> None:
    raw = Vector2.from_iter((1, 1), precision).div(0.0)
    assert raw.x == np.inf and raw.y == np.inf
    with pytest.raises(DivisionByZero):
        Vector2.from_iter((1, 1), precision).checked_div(0.0)
    with pytest.raises(DivisionByZero):
        Vector3.from_iter((1, 1, 1), precision).checked_componentwise_div(
            Vector3.from_iter((1, 0, 1), precision)
        )


# //2.- Operators reject mixed precisions just like the named methods.
def test_operators_reject_mixed_precision() -> None:
    single = Vector3.from_iter((1, 2, 3), FLOAT32)
    double = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(InvalidOperation):
        single + double
    with pytest.raises(InvalidOperation):
        double - single
    with pytest.raises(InvalidOperation):
        single * double
    with pytest.raises(InvalidOperation):
        single * np.float64(2.0)


# //3.- Single precision components whose squares overflow still have a finite length.
def test_large_float32_length_stays_finite() -> None:
    v = Vector3.from_iter((1e20, 0, 0), FLOAT32)
    assert v.length() == np.float32(1e20)
    assert math.isinf(v.length_squared())
    diagonal = Vector3.from_iter((3e20, 4e20, 0), FLOAT32)
    assert float(diagonal.length()) == pytest.approx(5e20, rel=1e-6)
    assert float(diagonal.distance(Vector3.zero(FLOAT32))) == pytest.approx(5e20, rel=1e-6)


def test_large_float32_normalize() -> None:
    assert Vector3.from_iter((1e20, 0, 0), FLOAT32).normalize() == Vector3.unit_x(FLOAT32)
    unit = Vector3.from_iter((1e20, 1e20, 0), FLOAT32).normalize()
    assert abs(unit.length() - FLOAT32.one()) < FLOAT32.epsilon()
    assert unit.x == pytest.approx(math.sqrt(0.5), rel=1e-6)


def test_large_float32_angle_and_projection() -> None:
    v = Vector3.from_iter((1e20, 1e20, 0), FLOAT32)
    assert v.angle_between(v) == 0.0
    x = Vector3.from_iter((1e20, 0, 0), FLOAT32)
    y = Vector3.from_iter((0, 1e20, 0), FLOAT32)
    assert float(x.angle_between(y)) == pytest.approx(math.pi / 2, rel=1e-6)
    a = Vector3.from_iter((1, 2, 3), FLOAT32)
    assert a.project(x).approx_eq(Vector3.from_iter((1, 0, 0), FLOAT32))
    assert a.reject(x).approx_eq(Vector3.from_iter((0, 2, 3), FLOAT32))


# //4.- Tiny double precision components whose squares underflow keep their length.
def test_tiny_float64_length_and_normalize() -> None:
    v = Vector3(1e-200, 0.0, 0.0)
    assert v.length_squared() == 0.0
    assert v.length() == 1e-200
    assert v.normalize(epsilon=1e-300) == Vector3.unit_x()
    with pytest.raises(DegenerateVector):
        v.normalize()


# //5.- Overflowing arithmetic yields IEEE values without numpy warnings.
def test_overflow_does_not_warn() -> None:
    big = Vector3.from_iter((3e38, -3e38, 1.0), FLOAT32)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        total = big + big
        assert math.isinf(total.x) and total.x > 0
        assert math.isinf(total.y) and total.y < 0
        assert math.isnan((total + total.negate()).x)
        assert math.isinf(big.scale(10.0).x)
        assert math.isinf(big.dot(big))
        assert math.isinf(big.lerp(big.negate(), -1.0).x)
        assert math.isinf(big.cross(Vector3.from_iter((0, 3e38, 0), FLOAT32)).z)
        assert big.angle_between(big) == 0.0
        assert not big.approx_eq(total)
