"""Tests for CsvWeatherRepository."""

import pandas as pd
import pytest
from climate_trends.domain.exceptions import NoUsableDataError
from climate_trends.infrastructure.repositories.csv_weather_repository import CsvWeatherRepository


def test_load_rows(tmp_path):
    """Test rows are loaded with blanks mapped to None."""
    data_file = tmp_path / "weather.csv"
    data_file.write_text(
        "time,Ktemp,other\n"
        "1950-01-01,270.5,x\n"
        ",280.0,y\n"
        "1950-01-03,,z\n"
    )

    rows = CsvWeatherRepository(str(data_file)).get_raw_rows()

    assert len(rows) == 3
    assert rows[0].time == "1950-01-01"
    assert rows[0].temperature_k == 270.5
    assert rows[1].time is None
    assert rows[2].temperature_k is None


def test_custom_column_names(tmp_path):
    """Test configurable column names."""
    data_file = tmp_path / "weather.csv"
    data_file.write_text("date,kelvin\n2001-05-05,290.0\n")

    rows = CsvWeatherRepository(
        str(data_file), time_column="date", temperature_column="kelvin"
    ).get_raw_rows()

    assert rows[0].time == "2001-05-05"
    assert rows[0].temperature_k == 290.0


def test_missing_file(tmp_path):
    """Test a missing file fails at construction."""
    with pytest.raises(FileNotFoundError):
        CsvWeatherRepository(str(tmp_path / "absent.csv"))


def test_empty_file(tmp_path):
    """Test an empty file reports no usable data."""
    data_file = tmp_path / "weather.csv"
    data_file.write_text("")

    with pytest.raises(NoUsableDataError):
        CsvWeatherRepository(str(data_file)).get_raw_rows()


def test_header_only(tmp_path):
    """Test a file without data rows reports no usable data."""
    data_file = tmp_path / "weather.csv"
    data_file.write_text("time,Ktemp\n")

    with pytest.raises(NoUsableDataError):
        CsvWeatherRepository(str(data_file)).get_raw_rows()


def test_missing_columns(tmp_path):
    """Test a table without the required columns reports no usable data."""
    data_file = tmp_path / "weather.csv"
    data_file.write_text("when,celsius\n2000-01-01,3.0\n")

    with pytest.raises(NoUsableDataError, match="Ktemp"):
        CsvWeatherRepository(str(data_file)).get_raw_rows()


def test_load_excel_rows(tmp_path):
    """Test an Excel workbook is read like a CSV file."""
    data_file = tmp_path / "weather.xlsx"
    pd.DataFrame(
        {"time": ["1950-01-01", "1950-01-02", None], "Ktemp": [270.5, None, 280.0]}
    ).to_excel(data_file, index=False)

    rows = CsvWeatherRepository(str(data_file)).get_raw_rows()

    assert len(rows) == 3
    assert rows[0].time == "1950-01-01"
    assert rows[0].temperature_k == 270.5
    assert rows[1].temperature_k is None
    assert rows[2].time is None


def test_corrupt_excel_file(tmp_path):
    """Test a file that is not a workbook reports no usable data."""
    data_file = tmp_path / "weather.xlsx"
    data_file.write_bytes(b"this is not a workbook")

    with pytest.raises(NoUsableDataError):
        CsvWeatherRepository(str(data_file)).get_raw_rows()
