import math

import pytest

from rangeclust.radians import Radians, deg, rad


def test_default_angle_is_invalid_zero():
    angle = Radians()
    assert angle.valid is False
    assert angle.value == 0.0


def test_factories_produce_valid_angles():
    assert deg(180).value == pytest.approx(math.pi)
    assert deg(180).valid is True
    assert rad(1.5).value == 1.5
    assert rad(1.5).valid is True


@pytest.mark.parametrize("degrees", [-720.0, -33.5, 0.0, 12.25, 359.0, 1000.0])
def test_degree_round_trip(degrees):
    assert Radians.from_degrees(degrees).to_degrees() == pytest.approx(degrees)


def test_addition_and_subtraction():
    assert (deg(30) + deg(60)).to_degrees() == pytest.approx(90.0)
    assert (rad(2.0) - rad(0.5)).value == pytest.approx(1.5)


def test_division_by_angle_and_number():
    assert deg(90) / deg(45) == pytest.approx(2.0)
    half = rad(3.0) / 2
    assert isinstance(half, Radians)
    assert half.value == pytest.approx(1.5)


def test_multiplication_both_sides():
    assert (rad(0.5) * 4).value == pytest.approx(rad(0.5).value * 4)
    assert (4 * rad(0.5)) == rad(0.5) * 4


def test_negation_and_abs():
    assert -rad(0.5) == rad(-0.5)
    assert rad(-0.5).abs() == rad(0.5)
    assert abs(rad(-0.25)) == rad(0.25)


def test_floor_drops_fractional_degrees():
    assert deg(10.7).floor().to_degrees() == pytest.approx(10.0)


def test_comparisons_tolerate_epsilon():
    assert rad(1.0) < rad(1.1)
    assert rad(1.1) > rad(1.0)
    assert not rad(1.0) < rad(1.0 + 1e-9)
    assert not rad(1.0 + 1e-9) > rad(1.0)


@pytest.mark.parametrize("degrees", [-1000.0, -90.0, 0.0, 45.0, 360.0, 725.0])
def test_normalize_lands_in_default_range(degrees):
    angle = deg(degrees)
    normalized = angle.normalize()
    assert 0.0 <= normalized.value <= 2 * math.pi
    periods = (angle.value - normalized.value) / (2 * math.pi)
    assert periods == pytest.approx(round(periods))


def test_normalize_custom_range():
    normalized = deg(270).normalize(deg(-180), deg(180))
    assert -math.pi <= normalized.value <= math.pi
    assert normalized.value == pytest.approx(deg(270).value - 2 * math.pi)


def test_normalize_inside_range_is_unchanged():
    assert deg(45).normalize().value == pytest.approx(deg(45).value)


def test_normalize_with_empty_range_raises():
    with pytest.raises(ValueError):
        deg(400).normalize(deg(10), deg(10))