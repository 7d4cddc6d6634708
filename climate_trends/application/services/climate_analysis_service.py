"""Main service orchestrating the climate statistics pipeline."""

import logging
from typing import Optional

from ...domain.entities.analysis_settings import AnalysisSettings
from ...domain.entities.climate_report import ClimateReport
from ...domain.exceptions import NoUsableDataError
from ...domain.repositories.weather_repository import WeatherRepository

# Use cases
from ...domain.use_cases.normalize_readings import NormalizeReadingsUseCase
from ...domain.use_cases.build_monthly_climatology import BuildMonthlyClimatologyUseCase
from ...domain.use_cases.build_yearly_trend import BuildYearlyTrendUseCase
from ...domain.use_cases.calculate_seasonal_anomalies import CalculateSeasonalAnomaliesUseCase
from ...domain.use_cases.classify_extreme_days import ClassifyExtremeDaysUseCase
from ...domain.use_cases.smooth_annual_cycle import SmoothAnnualCycleUseCase

logger = logging.getLogger(__name__)


class ClimateAnalysisService:
    """Runs every derivation over the full input on each call."""

    def __init__(
        self,
        weather_repo: WeatherRepository,
        settings: Optional[AnalysisSettings] = None,
    ):
        self.weather_repo = weather_repo
        self.settings = settings or AnalysisSettings()
        self.normalize_uc = NormalizeReadingsUseCase()
        self.monthly_uc = BuildMonthlyClimatologyUseCase()

    def analyze(self, settings: Optional[AnalysisSettings] = None) -> ClimateReport:
        """
        Load, normalize and derive all statistics.

        Args:
            settings: Parameters for this run (defaults to the service settings)

        Returns:
            ClimateReport built fresh from the data source

        Raises:
            NoUsableDataError: If the source yields no valid reading
        """
        settings = settings or self.settings
        logger.info("=== Starting climate analysis ===")

        raw_rows = self.weather_repo.get_raw_rows()
        readings = self.normalize_uc.execute(raw_rows)
        discarded = len(raw_rows) - len(readings)
        if discarded:
            logger.info(f"Discarded {discarded} rows with a missing or unparsable time/temperature")
        if not readings:
            raise NoUsableDataError(
                f"No usable data: none of {len(raw_rows)} rows has a valid time and temperature"
            )

        trend_uc = BuildYearlyTrendUseCase(threshold=settings.threshold_temp)
        anomaly_uc = CalculateSeasonalAnomaliesUseCase(
            baseline_start_year=settings.baseline_start_year,
            baseline_end_year=settings.baseline_end_year,
        )
        extremes_uc = ClassifyExtremeDaysUseCase(
            hot_threshold=settings.hot_threshold,
            cold_threshold=settings.cold_threshold,
        )
        cycle_uc = SmoothAnnualCycleUseCase(window_radius=settings.smoothing_window_radius)

        report = ClimateReport(
            settings=settings,
            reading_count=len(readings),
            discarded_count=discarded,
            monthly=self.monthly_uc.execute(readings),
            trend=trend_uc.execute(readings),
            anomalies=anomaly_uc.execute(readings),
            extremes=tuple(extremes_uc.execute(readings)),
            annual_cycle=tuple(cycle_uc.execute(readings)),
        )

        logger.info(
            f"=== Climate analysis completed: {report.reading_count} readings, "
            f"{report.monthly.min_year}-{report.monthly.max_year} ==="
        )
        return report
