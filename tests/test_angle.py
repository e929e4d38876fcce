import math

import pytest

from ecsengine.angle import Angle, deg


def test_as_degrees_returns_value():
    assert Angle(37.5).as_degrees() == 37.5


def test_deg_converts_to_float():
    value = deg(45).as_degrees()
    assert value == 45.0
    assert isinstance(value, float)


def test_half_turn_in_radians():
    assert deg(180).as_radians() == pytest.approx(math.pi)


def test_radians_round_trip():
    assert math.degrees(deg(37.5).as_radians()) == pytest.approx(37.5)


def test_add_and_subtract_scalar():
    a = deg(10)
    a += 5
    assert a == deg(15)
    assert (a - 5) == deg(10)


def test_add_angles():
    assert deg(20) + deg(30) - deg(30) == deg(20)


def test_comparisons_with_angles_and_numbers():
    assert deg(90) > deg(45)
    assert deg(45) <= deg(45)
    assert deg(100) > 89
    assert deg(-100) < -89
    assert deg(-89) >= -89


def test_clamping_with_min_and_max():
    assert min(deg(120), deg(89)) == deg(89)
    assert max(deg(-120), deg(-89)) == deg(-89)


def test_equality_and_hash():
    assert deg(30) == Angle(30.0)
    assert hash(deg(30)) == hash(Angle(30.0))
    assert deg(30) == 30


def test_negation():
    assert -deg(25) + deg(25) == deg(0)


def test_compare_with_unsupported_type_raises():
    with pytest.raises(TypeError):
        deg(1) < "a"