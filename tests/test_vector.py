# MIT License (see LICENSE)
import dataclasses

import numpy as np
import pytest

from gravity_sim.types import Vector2D
from gravity_sim.errors import DegenerateVectorError, GravitySimError


def test_arithmetic_returns_new_vectors():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(3.0, -4.0)

    assert a + b == Vector2D(4.0, -2.0)
    assert a - b == Vector2D(-2.0, 6.0)
    assert a * 2 == Vector2D(2.0, 4.0)
    assert 2 * a == Vector2D(2.0, 4.0)
    assert b / 2 == Vector2D(1.5, -2.0)
    assert -a == Vector2D(-1.0, -2.0)
    # operands untouched
    assert a == Vector2D(1.0, 2.0)
    assert b == Vector2D(3.0, -4.0)


def test_named_operations_match_operators():
    a = Vector2D(1.5, -0.5)
    b = Vector2D(0.25, 4.0)
    assert a.add(b) == a + b
    assert a.subtract(b) == a - b
    assert a.scale(3.0) == a * 3.0
    assert a.divide(4.0) == a / 4.0


def test_vector_is_immutable():
    v = Vector2D(1.0, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2D(1.0, 1.0).divide(0.0)
    with pytest.raises(ZeroDivisionError):
        Vector2D(1.0, 1.0) / 0


def test_magnitude_and_normalized():
    v = Vector2D(3.0, 4.0)
    assert v.magnitude() == pytest.approx(5.0)

    u = v.normalized()
    assert u.x == pytest.approx(0.6)
    assert u.y == pytest.approx(0.8)
    assert u.magnitude() == pytest.approx(1.0)


def test_normalizing_zero_vector_is_a_precondition_failure():
    with pytest.raises(DegenerateVectorError):
        Vector2D(0.0, 0.0).normalized()
    # part of the package taxonomy and an arithmetic failure
    assert issubclass(DegenerateVectorError, GravitySimError)
    assert issubclass(DegenerateVectorError, ArithmeticError)


def test_coercion_and_array_conversion():
    assert Vector2D.of((1, 2)) == Vector2D(1.0, 2.0)
    assert Vector2D.of(np.array([3.0, 4.0])) == Vector2D(3.0, 4.0)
    v = Vector2D(1.0, 2.0)
    assert Vector2D.of(v) is v

    arr = Vector2D(5.0, -6.0).as_array()
    assert arr.dtype == np.float64
    np.testing.assert_array_equal(arr, [5.0, -6.0])

    x, y = Vector2D(7.0, 8.0)
    assert (x, y) == (7.0, 8.0)
