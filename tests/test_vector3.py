import math

import pytest

from hullcut.vector3 import Vector3


A = Vector3(1.5, -2.0, 3.25)
B = Vector3(-0.5, 4.0, 2.0)


def test_add_then_subtract_round_trip():
    assert (A + B) - B == A


def test_negation_sums_to_zero():
    assert A + (-A) == Vector3()


def test_scalar_multiplication_both_sides():
    assert 2.0 * A == A * 2.0
    assert (A * 4.0) / 4.0 == A


def test_iteration_yields_components():
    assert tuple(A) == (1.5, -2.0, 3.25)


def test_str_format():
    assert str(Vector3(1, 2, 3)) == "(1,2,3)"


def test_cross_of_axes():
    assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)


def test_cross_is_orthogonal_to_inputs():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(B) == pytest.approx(0.0, abs=1e-12)


def test_cross_is_anticommutative():
    assert A.cross(B) == -B.cross(A)


def test_length_matches_length_squared():
    assert A.length() == pytest.approx(math.sqrt(A.length_squared()))
    assert A.length_squared() == pytest.approx(A.dot(A))


def test_normalized_has_unit_length_and_same_direction():
    n = A.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(A) == pytest.approx(A.length())


def test_normalized_zero_vector_fails():
    with pytest.raises(ZeroDivisionError):
        Vector3().normalized()


def test_projection_is_parallel_and_residual_orthogonal():
    p = A.projection(B)
    assert p.cross(B).length() == pytest.approx(0.0, abs=1e-12)
    assert (A - p).dot(B) == pytest.approx(0.0, abs=1e-12)


def test_distances_agree():
    assert A.distance_to(B) == pytest.approx(math.sqrt(A.squared_distance_to(B)))
    assert A.squared_distance_to(B) == pytest.approx((A - B).length_squared())
    assert A.distance_to(A) == 0.0


def test_inequality():
    assert Vector3(1, 2, 3) != Vector3(1, 2, 4)
    assert not (Vector3(1, 2, 3) != Vector3(1, 2, 3))