"""Tests for the command-line interface."""

import pytest
from climate_trends.presentation.cli.main import build_parser, main


@pytest.fixture
def data_file(tmp_path):
    lines = ["time,Ktemp"]
    for year, kelvin in ((1955, 283.15), (1975, 284.15), (2015, 287.15)):
        for month in (1, 4, 7, 10):
            lines.append(f"{year}-{month:02d}-15 00:00:00,{kelvin}")
    lines.append(",290.0")
    path = tmp_path / "weather.csv"
    path.write_text("\n".join(lines) + "\n")
    return path


def test_parser_requires_command():
    """Test a subcommand is mandatory."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_summary(data_file, capsys):
    """Test the summary command prints the dataset overview."""
    main(["summary", "--data-file", str(data_file)])

    out = capsys.readouterr().out
    assert "CLIMATE SUMMARY" in out
    assert "1955-2015" in out
    assert "12 (1 discarded)" in out
    assert "2015" in out


@pytest.mark.parametrize(
    "command, expected",
    [
        (["monthly"], "MONTHLY AVERAGES (ALL YEARS)"),
        (["monthly", "--year", "1975"], "MONTHLY AVERAGES (1975)"),
        (["trend", "--threshold", "50"], "DECADE AVERAGES"),
        (["anomalies", "--baseline-start", "1950", "--baseline-end", "1980"], "1970s"),
        (["extremes", "--hot", "55", "--cold", "10"], "EXTREME DAYS"),
        (["cycle", "--radius", "2"], "ANNUAL CYCLE"),
    ],
)
def test_commands(data_file, capsys, command, expected):
    """Test each table command prints its table."""
    main(command + ["--data-file", str(data_file)])
    assert expected in capsys.readouterr().out


def test_monthly_year_day_count(data_file, capsys):
    """Test the single-year table reports how many days it covers."""
    main(["monthly", "--year", "2015", "--data-file", str(data_file)])
    assert "Days: 4" in capsys.readouterr().out


def test_unknown_year_exits(data_file):
    """Test asking for a year without data exits with an error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["monthly", "--year", "1800", "--data-file", str(data_file)])
    assert exc_info.value.code == 1


def test_missing_file_exits(tmp_path):
    """Test a missing data file exits with an error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["summary", "--data-file", str(tmp_path / "absent.csv")])
    assert exc_info.value.code == 1


def test_invalid_thresholds_exit(data_file):
    """Test inconsistent thresholds exit with an error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["extremes", "--hot", "10", "--cold", "50", "--data-file", str(data_file)])
    assert exc_info.value.code == 1


def test_no_usable_data_exits(tmp_path):
    """Test a file without valid rows exits with an error."""
    path = tmp_path / "weather.csv"
    path.write_text("time,Ktemp\n,280.0\n2000-01-01,\n")
    with pytest.raises(SystemExit) as exc_info:
        main(["summary", "--data-file", str(path)])
    assert exc_info.value.code == 1
