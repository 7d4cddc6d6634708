"""Example usage of the climate trends pipeline."""

import logging
from climate_trends.application.services.climate_analysis_service import ClimateAnalysisService
from climate_trends.domain.entities.analysis_settings import AnalysisSettings
from climate_trends.infrastructure.repositories.csv_weather_repository import CsvWeatherRepository
from config.settings import (
    ANALYSIS_SETTINGS,
    LOG_FORMAT,
    TEMPERATURE_COLUMN,
    TIME_COLUMN,
    WEATHER_DATA_FILE,
)

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    weather_repo = CsvWeatherRepository(
        str(WEATHER_DATA_FILE), time_column=TIME_COLUMN, temperature_column=TEMPERATURE_COLUMN
    )
    service = ClimateAnalysisService(
        weather_repo=weather_repo,
        settings=AnalysisSettings.from_dict(ANALYSIS_SETTINGS),
    )

    # Example 1: Default analysis
    print("=" * 60)
    print("Example 1: Warming trend with default settings")
    print("=" * 60)
    try:
        report = service.analyze()
        print(f"\nYears: {report.monthly.min_year}-{report.monthly.max_year}")
        print(f"First year above {report.trend.threshold}°F: {report.trend.first_year_above}")
        for decade in report.trend.decades:
            print(f"  {decade.label}: {decade.average:.2f}°F")
    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        return

    # Example 2: Alternative baseline
    print("\n" + "=" * 60)
    print("Example 2: Seasonal anomalies against a 1961-1990 baseline")
    print("=" * 60)
    try:
        report = service.analyze(report.settings.override(baseline_start_year=1961, baseline_end_year=1990))
        for decade in report.anomalies.decade_anomalies:
            values = ", ".join(
                f"{season.value}: {'n/a' if value is None else f'{value:+.2f}'}"
                for season, value in decade.by_season().items()
            )
            print(f"  {decade.label}: {values}")
    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)


if __name__ == "__main__":
    main()
