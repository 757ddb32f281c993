"""Test shortest-path angle difference and normalization."""

import numpy as np
import pytest

from spinwheel.physics.angle_math import difference, normalize


@pytest.mark.parametrize(
    "from_angle, to_angle, expected",
    [
        (170.0, -170.0, 20.0),
        (-170.0, 170.0, -20.0),
        (0.0, 350.0, -10.0),
        (0.0, -350.0, 10.0),
        (0.0, 720.0, 0.0),
        (10.0, 30.0, 20.0),
        (30.0, 10.0, -20.0),
    ],
)
def test_difference_reference_values(from_angle, to_angle, expected):
    """Test the wraparound reference table."""
    assert difference(from_angle, to_angle) == pytest.approx(expected)


def test_difference_of_equal_angles_is_zero():
    for a in (-720.0, -180.0, 0.0, 45.5, 180.0, 1e6):
        assert difference(a, a) == 0.0


def test_difference_half_turn_is_positive():
    """A half turn is reported as +180, never -180."""
    assert difference(0.0, 180.0) == 180.0
    assert difference(0.0, -180.0) == 180.0
    assert difference(90.0, -90.0) == 180.0


def test_difference_stays_in_canonical_range():
    rng = np.random.default_rng(42)
    samples = rng.uniform(-1e5, 1e5, size=(500, 2))

    for a, b in samples:
        d = difference(float(a), float(b))
        assert -180.0 < d <= 180.0


def test_difference_ignores_whole_turns():
    assert difference(10.0, 10.0 + 360.0 * 7 + 15.0) == pytest.approx(15.0)
    assert difference(-3600.0, 5.0) == pytest.approx(5.0)


def test_difference_terminates_for_huge_inputs():
    d = difference(0.0, 1e300)
    assert -180.0 < d <= 180.0


def test_normalize_range():
    assert normalize(0.0) == 0.0
    assert normalize(360.0) == 0.0
    assert normalize(-45.0) == pytest.approx(315.0)
    assert normalize(1624.0) == pytest.approx(184.0)
    # Tiny negative values must not round up to a full turn
    assert 0.0 <= normalize(-1e-20) < 360.0
