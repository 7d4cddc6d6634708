"""Tests for SmoothAnnualCycleUseCase."""

import pytest
from datetime import date, timedelta
from climate_trends.domain.entities.season import Season
from climate_trends.domain.use_cases.smooth_annual_cycle import (
    SmoothAnnualCycleUseCase,
    moving_average,
)


def test_cycle_has_366_slots(make_year):
    """Test one point per day of year, with day 366 from leap years only."""
    readings = make_year(2019, 50.0) + make_year(2020, 50.0)

    cycle = SmoothAnnualCycleUseCase().execute(readings)

    assert len(cycle) == 366
    assert [point.day_of_year for point in cycle] == list(range(1, 367))
    assert cycle[0].count == 2
    assert cycle[364].count == 2
    assert cycle[365].count == 1


def test_constant_input_smooths_to_constant(make_year):
    """Test smoothing a constant series returns the constant."""
    cycle = SmoothAnnualCycleUseCase().execute(make_year(2020, 61.5))

    for point in cycle[3:363]:
        assert point.smoothed_average == pytest.approx(61.5)
        assert point.raw_average == 61.5


def test_edges_are_not_smoothed(make_year):
    """Test the first and last radius slots keep no smoothed value."""
    cycle = SmoothAnnualCycleUseCase(window_radius=3).execute(make_year(2020, 40.0))

    assert [point.smoothed_average for point in cycle[:3]] == [None, None, None]
    assert [point.smoothed_average for point in cycle[-3:]] == [None, None, None]
    assert cycle[3].smoothed_average is not None
    assert cycle[362].smoothed_average is not None


def test_window_does_not_wrap(make_reading):
    """Test late-December values never enter early-January windows."""
    readings = [make_reading(date(2020, 12, 31), 10.0), make_reading(date(2020, 1, 4), 30.0)]
    readings += [make_reading(date(2020, 1, 5) + timedelta(days=i), 50.0) for i in range(3)]

    cycle = SmoothAnnualCycleUseCase(window_radius=3).execute(readings)

    # Day 4 window covers days 1-7: only days 4-7 have data.
    assert cycle[3].smoothed_average == pytest.approx((30.0 + 3 * 50.0) / 4)


def test_smoothing_skips_missing_days():
    """Test missing values are skipped and empty windows stay missing."""
    values = [None] * 10 + [10.0, None, 20.0, None, None, 30.0] + [None] * 10

    smoothed = moving_average(values, radius=1)

    assert smoothed[11] == pytest.approx(15.0)
    assert smoothed[13] == pytest.approx(20.0)
    assert smoothed[4] is None
    assert smoothed[0] is None
    assert len(smoothed) == len(values)


def test_zero_radius_keeps_raw_values():
    """Test a radius of zero returns the raw series."""
    values = [1.0, None, 3.0]
    assert moving_average(values, radius=0) == [1.0, None, 3.0]


def test_missing_days_have_no_raw_average(make_reading):
    """Test days without readings are missing, not zero."""
    cycle = SmoothAnnualCycleUseCase().execute([make_reading(date(2001, 6, 1), 70.0)])

    assert cycle[151].raw_average == 70.0
    assert cycle[0].raw_average is None
    assert cycle[0].count == 0
    assert cycle[200].smoothed_average is None


def test_seasons_follow_day_table():
    """Test season labels use the fixed day-of-year table."""
    cycle = SmoothAnnualCycleUseCase().execute([])

    assert cycle[58].season == Season.WINTER
    assert cycle[59].season == Season.SPRING
    assert cycle[151].season == Season.SUMMER
    assert cycle[243].season == Season.FALL
    assert cycle[334].season == Season.WINTER
    assert cycle[365].season == Season.WINTER


def test_invalid_radius():
    """Test negative radius is rejected."""
    with pytest.raises(ValueError):
        SmoothAnnualCycleUseCase(window_radius=-1)
