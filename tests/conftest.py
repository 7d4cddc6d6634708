"""Shared fixtures for building readings and raw rows."""

from datetime import date, timedelta
from typing import List

import pytest

from climate_trends.domain.entities.reading import RawRow, Reading
from climate_trends.domain.entities.season import Season


def build_reading(day: date, temp_f: float) -> Reading:
    month = day.month - 1
    return Reading(
        date=day,
        year=day.year,
        month=month,
        day_of_year=day.timetuple().tm_yday,
        season=Season.from_month(month),
        temp_f=temp_f,
    )


def build_year(year: int, temp_f: float) -> List[Reading]:
    day = date(year, 1, 1)
    readings = []
    while day.year == year:
        readings.append(build_reading(day, temp_f))
        day += timedelta(days=1)
    return readings


def fahrenheit_to_kelvin(temp_f: float) -> float:
    return (temp_f - 32) * 5 / 9 + 273.15


@pytest.fixture
def make_reading():
    """Factory for a single Reading."""
    return build_reading


@pytest.fixture
def make_year():
    """Factory for one Reading per day of a year at a constant temperature."""
    return build_year


@pytest.fixture
def round_trip_readings():
    """1950 at 50°F, 1980 at 55°F and 2020 at 60°F, every day."""
    return build_year(1950, 50.0) + build_year(1980, 55.0) + build_year(2020, 60.0)


@pytest.fixture
def raw_rows():
    """Two valid raw rows and three defective ones."""
    return [
        RawRow(time="2020-01-01", temperature_k=fahrenheit_to_kelvin(40.0)),
        RawRow(time="2020-07-01", temperature_k=fahrenheit_to_kelvin(80.0)),
        RawRow(time="", temperature_k=fahrenheit_to_kelvin(99.0)),
        RawRow(time="2020-02-01", temperature_k=None),
        RawRow(time="not a date", temperature_k=280.0),
    ]
