"""CLI interface for the climate trends pipeline."""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

import pandas as pd

from ...application.services.climate_analysis_service import ClimateAnalysisService
from ...domain.entities.analysis_settings import AnalysisSettings
from ...domain.entities.climate_report import ClimateReport
from ...domain.exceptions import NoUsableDataError
from ...infrastructure.repositories.csv_weather_repository import CsvWeatherRepository

from config.settings import (
    ANALYSIS_SETTINGS,
    LOG_FORMAT,
    TEMPERATURE_COLUMN,
    TIME_COLUMN,
    WEATHER_DATA_FILE,
)

logger = logging.getLogger(__name__)


def _table(rows: List[Dict[str, Any]]) -> str:
    return pd.DataFrame(rows).to_string(
        index=False, float_format=lambda value: f"{value:.2f}", na_rep="n/a"
    )


def _banner(title: str) -> None:
    print("\n" + "=" * 60)
    print(f" {title} ")
    print("=" * 60)


def print_summary(report: ClimateReport) -> None:
    settings = report.settings
    baseline = report.anomalies.baseline
    _banner("CLIMATE SUMMARY")
    print(f" Years:            {report.monthly.min_year}-{report.monthly.max_year}")
    print(f" Valid readings:   {report.reading_count} ({report.discarded_count} discarded)")
    first_year = report.trend.first_year_above
    print(
        f" First year > {settings.threshold_temp}°F: "
        f"{first_year if first_year is not None else 'never'}"
    )
    print(f" Baseline:         {baseline.start_year}-{baseline.end_year} ({baseline.year_count} years)")
    for season, value in baseline.by_season().items():
        print(f"   {season.value:<8} {'n/a' if value is None else f'{value:.2f}°F'}")
    print("=" * 60)


def print_monthly(report: ClimateReport, year: Optional[int] = None) -> None:
    profile = report.monthly.all_years
    title = "MONTHLY AVERAGES (ALL YEARS)"
    if year is not None:
        profile = report.monthly.for_year(year)
        if profile is None:
            raise ValueError(
                f"No data for {year}; available years are "
                f"{report.monthly.min_year}-{report.monthly.max_year}"
            )
        title = f"MONTHLY AVERAGES ({year})"
    _banner(title)
    print(f" Days: {profile.total_count}")
    print(
        _table(
            [
                {"month": p.month_name, "avg_temp_f": p.average, "days": p.count}
                for p in profile.points
            ]
        )
    )


def print_trend(report: ClimateReport) -> None:
    trend = report.trend
    _banner(f"YEARLY AVERAGES (threshold {trend.threshold}°F)")
    print(
        _table(
            [
                {"year": p.year, "avg_temp_f": p.average, "days": p.count, "above": p.is_above_threshold}
                for p in trend.yearly
            ]
        )
    )
    _banner("DECADE AVERAGES")
    print(
        _table(
            [
                {"decade": p.label, "avg_temp_f": p.average, "years": p.year_count, "above": p.is_above_threshold}
                for p in trend.decades
            ]
        )
    )


def print_anomalies(report: ClimateReport) -> None:
    anomalies = report.anomalies
    _banner(
        f"SEASONAL ANOMALIES BY DECADE "
        f"(baseline {anomalies.baseline.start_year}-{anomalies.baseline.end_year})"
    )
    print(
        _table(
            [
                {"decade": d.label, **{season.value: value for season, value in d.by_season().items()}}
                for d in anomalies.decade_anomalies
            ]
        )
    )


def print_extremes(report: ClimateReport) -> None:
    settings = report.settings
    _banner(f"EXTREME DAYS (>{settings.hot_threshold}°F / <{settings.cold_threshold}°F)")
    print(
        _table(
            [
                {
                    "decade": s.label,
                    "hot_days": s.hot_days,
                    "cold_days": s.cold_days,
                    "total_days": s.total_days,
                    "hot_pct": s.hot_pct,
                    "cold_pct": s.cold_pct,
                }
                for s in report.extremes
            ]
        )
    )


def print_cycle(report: ClimateReport) -> None:
    _banner("ANNUAL CYCLE")
    print(
        _table(
            [
                {
                    "day": p.day_of_year,
                    "season": p.season.value,
                    "raw_f": p.raw_average,
                    "smoothed_f": p.smoothed_average,
                    "years": p.count,
                }
                for p in report.annual_cycle
            ]
        )
    )


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data-file", type=str, default=str(WEATHER_DATA_FILE), help="CSV/Excel input")
    common.add_argument("--threshold", type=float, default=None, help="Yearly threshold (°F)")
    common.add_argument("--baseline-start", type=int, default=None, help="First baseline year")
    common.add_argument("--baseline-end", type=int, default=None, help="Last baseline year")
    common.add_argument("--hot", type=float, default=None, help="Extreme hot threshold (°F)")
    common.add_argument("--cold", type=float, default=None, help="Extreme cold threshold (°F)")
    common.add_argument("--radius", type=int, default=None, help="Smoothing window radius (days)")

    parser = argparse.ArgumentParser(description="Climate trends from daily temperatures")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("summary", parents=[common], help="Overview of the dataset and baseline")
    monthly_parser = subparsers.add_parser("monthly", parents=[common], help="Monthly averages")
    monthly_parser.add_argument("--year", type=int, default=None, help="Single year (default: all years)")
    subparsers.add_parser("trend", parents=[common], help="Yearly and decade averages")
    subparsers.add_parser("anomalies", parents=[common], help="Seasonal anomalies by decade")
    subparsers.add_parser("extremes", parents=[common], help="Extreme days by decade")
    subparsers.add_parser("cycle", parents=[common], help="Smoothed day-of-year cycle")
    return parser


def main(argv: Optional[List[str]] = None):
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, handlers=[logging.StreamHandler(sys.stderr)])
    args = build_parser().parse_args(argv)

    try:
        settings = AnalysisSettings.from_dict(ANALYSIS_SETTINGS).override(
            threshold_temp=args.threshold,
            baseline_start_year=args.baseline_start,
            baseline_end_year=args.baseline_end,
            hot_threshold=args.hot,
            cold_threshold=args.cold,
            smoothing_window_radius=args.radius,
        )
        weather_repo = CsvWeatherRepository(
            args.data_file, time_column=TIME_COLUMN, temperature_column=TEMPERATURE_COLUMN
        )
        service = ClimateAnalysisService(weather_repo=weather_repo, settings=settings)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Failed to initialize service: {e}")
        sys.exit(1)

    try:
        report = service.analyze()
        if args.command == "summary":
            print_summary(report)
        elif args.command == "monthly":
            print_monthly(report, year=args.year)
        elif args.command == "trend":
            print_trend(report)
        elif args.command == "anomalies":
            print_anomalies(report)
        elif args.command == "extremes":
            print_extremes(report)
        elif args.command == "cycle":
            print_cycle(report)
    except NoUsableDataError as e:
        logger.error(f"No usable data: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
