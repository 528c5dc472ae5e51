import math

import numpy as np
import pytest

from forecasting.series import (
    clamp_month,
    round2,
    seasonal_indices,
    to_monthly_series,
    trend_factor,
    weighted_average,
)


def test_to_monthly_series_pads_and_truncates() -> None:
    short = to_monthly_series([1, 2, 3])
    assert short.shape == (12,)
    assert list(short[:3]) == [1.0, 2.0, 3.0]
    assert not short[3:].any()

    long = to_monthly_series(list(range(1, 16)))
    assert long.shape == (12,)
    assert long[-1] == 12.0


def test_to_monthly_series_treats_missing_as_zero() -> None:
    series = to_monthly_series([None, "x", float("nan"), float("inf"), 5])
    assert list(series[:5]) == [0.0, 0.0, 0.0, 0.0, 5.0]
    assert not to_monthly_series(None).any()


def test_clamp_month() -> None:
    assert clamp_month(3) == 3
    assert clamp_month(0) == 0
    assert clamp_month(-4) == 0
    assert clamp_month(13) == 12
    assert clamp_month("7") == 7
    assert clamp_month(None) == 0


def test_seasonal_indices_sum_to_twelve() -> None:
    last_year = to_monthly_series([10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110, 120])
    indices = seasonal_indices(last_year)
    assert float(np.sum(indices)) == pytest.approx(12.0)
    assert indices[0] == pytest.approx(10 / 780 * 12)


def test_seasonal_indices_flat_when_last_year_is_empty() -> None:
    indices = seasonal_indices(np.zeros(12))
    assert all(i == pytest.approx(1 / 12) for i in indices)


def test_trend_factor() -> None:
    assert trend_factor(np.array([110.0, 120.0]), np.array([100.0, 100.0])) == pytest.approx(1.15)
    # no last-year signal
    assert trend_factor(np.array([50.0]), np.array([0.0])) == 1.0
    assert trend_factor(np.array([]), np.array([])) == 1.0


def test_weighted_average_uses_overlapping_weights_only() -> None:
    assert weighted_average([100, 100, 100, 100]) == pytest.approx(100.0)
    assert weighted_average([20, 10]) == pytest.approx((20 * 0.4 + 10 * 0.3) / 0.7)
    assert weighted_average([1, 2, 3, 4, 5, 6]) == pytest.approx(0.4 + 0.6 + 0.6 + 0.4)
    assert weighted_average([]) == 0.0


def test_round2_is_half_up() -> None:
    assert round2(0.125) == 0.13
    assert round2(-0.125) == -0.12
    assert round2(70) == 70.0
    assert round2(1 / 3) == 0.33


def test_round2_non_finite_becomes_zero() -> None:
    assert round2(float("inf")) == 0.0
    assert round2(float("nan")) == 0.0
    assert not math.isnan(round2(-float("inf")))


def test_values_too_large_for_float_become_zero() -> None:
    series = to_monthly_series([10**400, 5, -(10**400)])
    assert list(series[:3]) == [0.0, 5.0, 0.0]
    assert round2(10**400) == 0.0
