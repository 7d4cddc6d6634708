"""Tests for NormalizeReadingsUseCase."""

import math

import pytest
from datetime import date
from climate_trends.domain.entities.reading import RawRow
from climate_trends.domain.entities.season import Season
from climate_trends.domain.use_cases.normalize_readings import (
    NormalizeReadingsUseCase,
    kelvin_to_fahrenheit,
    normalize_row,
)


def test_kelvin_to_fahrenheit():
    """Test unit conversion at reference points."""
    assert kelvin_to_fahrenheit(273.15) == 32.0
    assert kelvin_to_fahrenheit(373.15) == pytest.approx(212.0)
    assert kelvin_to_fahrenheit(290.0) == (290.0 - 273.15) * (9 / 5) + 32


def test_normalize_row_basic():
    """Test calendar attributes of a normalized reading."""
    reading = normalize_row(RawRow(time="1975-03-15 00:00:00", temperature_k=283.15))

    assert reading is not None
    assert reading.date == date(1975, 3, 15)
    assert reading.year == 1975
    assert reading.month == 2
    assert reading.day_of_year == 74
    assert reading.season == Season.SPRING
    assert reading.temp_f == kelvin_to_fahrenheit(283.15)


def test_normalize_row_december_is_winter():
    """Test December readings are classified as winter of the same year."""
    reading = normalize_row(RawRow(time="1999-12-31", temperature_k=270.0))
    assert reading.year == 1999
    assert reading.month == 11
    assert reading.season == Season.WINTER


def test_normalize_row_leap_day_of_year():
    """Test day 366 exists only at the end of leap years."""
    assert normalize_row(RawRow(time="2020-12-31", temperature_k=270.0)).day_of_year == 366
    assert normalize_row(RawRow(time="2021-12-31", temperature_k=270.0)).day_of_year == 365
    assert normalize_row(RawRow(time="2021-01-01", temperature_k=270.0)).day_of_year == 1


def test_normalize_row_string_temperature():
    """Test numeric strings are accepted as temperatures."""
    reading = normalize_row(RawRow(time="2000-06-01", temperature_k="300.5"))
    assert reading.temp_f == kelvin_to_fahrenheit(300.5)


@pytest.mark.parametrize(
    "row",
    [
        RawRow(time=None, temperature_k=280.0),
        RawRow(time="", temperature_k=280.0),
        RawRow(time="   ", temperature_k=280.0),
        RawRow(time="yesterday-ish", temperature_k=280.0),
        RawRow(time="2000-13-45", temperature_k=280.0),
        RawRow(time="2000-01-01", temperature_k=None),
        RawRow(time="2000-01-01", temperature_k=""),
        RawRow(time="2000-01-01", temperature_k="warm"),
        RawRow(time="2000-01-01", temperature_k=math.nan),
        RawRow(time="2000-01-01", temperature_k=math.inf),
    ],
)
def test_normalize_row_discards_defective_rows(row):
    """Test rows with a missing or unparsable field are discarded."""
    assert normalize_row(row) is None


def test_execute_drops_invalid_rows(raw_rows):
    """Test the use case keeps valid rows in order."""
    readings = NormalizeReadingsUseCase().execute(raw_rows)

    assert [reading.date for reading in readings] == [date(2020, 1, 1), date(2020, 7, 1)]
    assert readings[0].temp_f == pytest.approx(40.0)
    assert readings[1].temp_f == pytest.approx(80.0)


def test_execute_empty():
    """Test empty input yields no readings."""
    assert NormalizeReadingsUseCase().execute([]) == []
