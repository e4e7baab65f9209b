"""Tests for ZeroRateCurve."""

import math

import pytest

from calc.basics import Currency
from calc.curves import ZeroRateCurve
from calc.interfaces import Curve

USD = Currency("USD")


def test_curve_interpolation_endpoints() -> None:
    """Endpoints: rate at first/last pillar equals stored rate."""
    curve = ZeroRateCurve(USD, [0.5, 1.0, 2.0, 5.0], [0.05, 0.04, 0.035, 0.03])
    assert curve.zero_rate(0.5) == 0.05
    assert curve.zero_rate(5.0) == 0.03


def test_curve_interpolation_between_pillars() -> None:
    """Linear interpolation in zero rates between neighbouring pillars."""
    curve = ZeroRateCurve(USD, [0.0, 2.0, 4.0], [0.04, 0.06, 0.02])
    assert abs(curve.zero_rate(1.0) - 0.05) < 1e-12
    assert abs(curve.zero_rate(3.0) - 0.04) < 1e-12


def test_curve_flat_extrapolation() -> None:
    """Before the first and after the last pillar the rate is flat."""
    curve = ZeroRateCurve(USD, [0.5, 1.0], [0.05, 0.04])
    assert curve.zero_rate(0.0) == 0.05
    assert curve.zero_rate(0.25) == 0.05
    assert curve.zero_rate(7.0) == 0.04


def test_df_formula_and_monotonic() -> None:
    """DF(t) = exp(-r(t)*t), decreasing in t for positive rates."""
    curve = ZeroRateCurve(USD, [0.5, 1.0, 2.0, 5.0], [0.05, 0.04, 0.035, 0.03])
    assert abs(curve.df(1.0) - math.exp(-0.04)) < 1e-12
    assert curve.df(0.0) == 1.0
    dfs = [curve.df(t) for t in (0.1, 0.5, 1.0, 1.5, 2.0, 3.0, 5.0, 7.0)]
    assert all(later < earlier for earlier, later in zip(dfs, dfs[1:]))


def test_bumped_curve_is_new_curve() -> None:
    """bumped() shifts every rate and leaves the original untouched."""
    curve = ZeroRateCurve(USD, [1.0, 2.0], [0.04, 0.05])
    bumped = curve.bumped(0.0001)
    assert bumped.zero_rates == pytest.approx((0.0401, 0.0501))
    assert curve.zero_rates == (0.04, 0.05)
    assert bumped.currency == USD


def test_curve_satisfies_protocol() -> None:
    curve = ZeroRateCurve(USD, [1.0], [0.04])
    assert isinstance(curve, Curve)
    assert curve.name == "USD-DSC"


def test_validation() -> None:
    with pytest.raises(ValueError, match="strictly increasing"):
        ZeroRateCurve(USD, [2.0, 1.0], [0.04, 0.04])
    with pytest.raises(ValueError, match="same length"):
        ZeroRateCurve(USD, [1.0, 2.0], [0.04])
    with pytest.raises(ValueError, match="at least one pillar"):
        ZeroRateCurve(USD, [], [])


def test_zero_rate_t_negative_raises() -> None:
    curve = ZeroRateCurve(USD, [1.0], [0.04])
    with pytest.raises(ValueError, match="t must be >= 0"):
        curve.zero_rate(-0.1)
