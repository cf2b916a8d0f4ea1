import math

import pytest

from ropesim.Vec2 import Vec2


def test_arithmetic_returns_new_vectors():
    a = Vec2(1, 2)
    b = Vec2(3, 5)
    assert a + b == Vec2(4, 7)
    assert b - a == Vec2(2, 3)
    assert a * 2 == Vec2(2, 4)
    assert 2 * a == Vec2(2, 4)
    assert a == Vec2(1, 2)


def test_in_place_ops_mutate_and_chain():
    v = Vec2(1, 1)
    assert v.add(Vec2(1, 2)).scale(2) is v
    assert v == Vec2(4, 6)
    v.subtract(Vec2(4, 6))
    assert v == Vec2(0, 0)


def test_length_and_distance():
    assert Vec2(3, 4).length() == 5.0
    assert Vec2(3, 4).length_sq() == 25.0
    assert Vec2(1, 1).distance_to(Vec2(4, 5)) == 5.0
    assert Vec2(1, 1).distance_sq_to(Vec2(4, 5)) == 25.0


def test_normalize_zero_vector_uses_fallback():
    n = Vec2(0, 0).normalize()
    assert n == Vec2(1, 0)
    assert n.is_finite()


def test_normalize_unit_length():
    n = Vec2(-3, 4).normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.x == pytest.approx(-0.6)


def test_midpoint_and_clone():
    a = Vec2(0, 0)
    m = a.midpoint(Vec2(10, -4))
    assert m == Vec2(5, -2)
    c = m.clone()
    c.x = 99
    assert m.x == 5


def test_of_accepts_tuples_and_copies_vectors():
    v = Vec2(1, 2)
    assert Vec2.of((1, 2)) == v
    assert Vec2.of(v) is not v


def test_is_finite_flags_nan_and_inf():
    assert not Vec2(math.nan, 0).is_finite()
    assert not Vec2(0, math.inf).is_finite()
    assert Vec2(1e300, -1e300).is_finite()


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(Vec2(0, 0))
