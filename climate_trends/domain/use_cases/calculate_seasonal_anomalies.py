"""Use case for seasonal baselines and temperature anomalies."""

import logging
from typing import List, Optional, Sequence

from ..entities.aggregate import Aggregate
from ..entities.anomaly import (
    AnomalyReport,
    Baseline,
    DecadeAnomaly,
    SeasonalAnomaly,
    SeasonalAverages,
    SeasonalFields,
)
from ..entities.reading import Reading
from ..entities.season import Season
from ..entities.trend import decade_of
from .grouping import by_year_season, fold_by, group_by

logger = logging.getLogger(__name__)


def _difference(value: Optional[float], reference: Optional[float]) -> Optional[float]:
    if value is None or reference is None:
        return None
    return value - reference


def _add_value(aggregate: Aggregate, item) -> Aggregate:
    return aggregate.add(item[-1])


class CalculateSeasonalAnomaliesUseCase:
    """Use case to compare each year's seasons with a fixed historical baseline."""

    def __init__(self, baseline_start_year: int = 1951, baseline_end_year: int = 1980):
        """
        Initialize use case.

        Args:
            baseline_start_year: First year of the baseline window (inclusive)
            baseline_end_year: Last year of the baseline window (inclusive)
        """
        self.baseline_start_year = baseline_start_year
        self.baseline_end_year = baseline_end_year

    def _seasonal_averages(self, readings: Sequence[Reading]) -> List[SeasonalAverages]:
        groups = group_by(readings, by_year_season)
        years = sorted({year for year, _ in groups})
        return [
            SeasonalAverages(
                year=year,
                **SeasonalFields.season_kwargs(
                    {season: groups.get((year, season), Aggregate()).average for season in Season}
                ),
            )
            for year in years
        ]

    def _baseline(self, seasonal_averages: Sequence[SeasonalAverages]) -> Baseline:
        window = [
            averages
            for averages in seasonal_averages
            if self.baseline_start_year <= averages.year <= self.baseline_end_year
        ]
        # Average of yearly averages: every baseline year counts once.
        per_season = fold_by(
            (
                (season, averages.get(season))
                for averages in window
                for season in Season
                if averages.get(season) is not None
            ),
            lambda item: item[0],
            Aggregate(),
            _add_value,
        )
        baseline = Baseline(
            start_year=self.baseline_start_year,
            end_year=self.baseline_end_year,
            year_count=len(window),
            **SeasonalFields.season_kwargs(
                {season: aggregate.average for season, aggregate in per_season.items()}
            ),
        )

        missing = [str(season) for season in Season if baseline.get(season) is None]
        if missing:
            logger.warning(
                f"No baseline data in {self.baseline_start_year}-{self.baseline_end_year} "
                f"for: {', '.join(missing)}; their anomalies will be missing"
            )
        return baseline

    @staticmethod
    def _anomalies(
        seasonal_averages: Sequence[SeasonalAverages], baseline: Baseline
    ) -> List[SeasonalAnomaly]:
        return [
            SeasonalAnomaly(
                year=averages.year,
                **SeasonalFields.season_kwargs(
                    {
                        season: _difference(averages.get(season), baseline.get(season))
                        for season in Season
                    }
                ),
            )
            for averages in seasonal_averages
        ]

    @staticmethod
    def _decade_anomalies(anomalies: Sequence[SeasonalAnomaly]) -> List[DecadeAnomaly]:
        groups = fold_by(
            (
                (decade_of(anomaly.year), season, anomaly.get(season))
                for anomaly in anomalies
                for season in Season
                if anomaly.get(season) is not None
            ),
            lambda item: (item[0], item[1]),
            Aggregate(),
            _add_value,
        )
        decades = sorted({decade_of(anomaly.year) for anomaly in anomalies})
        return [
            DecadeAnomaly(
                decade=decade,
                **SeasonalFields.season_kwargs(
                    {
                        season: groups.get((decade, season), Aggregate()).average
                        for season in Season
                    }
                ),
            )
            for decade in decades
        ]

    def execute(self, readings: Sequence[Reading]) -> AnomalyReport:
        """
        Execute the anomaly calculation.

        Args:
            readings: Normalized readings

        Returns:
            AnomalyReport with baseline, per-year and per-decade anomalies
        """
        seasonal_averages = self._seasonal_averages(readings)
        baseline = self._baseline(seasonal_averages)
        anomalies = self._anomalies(seasonal_averages, baseline)
        decade_anomalies = self._decade_anomalies(anomalies)

        logger.info(
            f"Computed seasonal anomalies for {len(anomalies)} years "
            f"against {baseline.year_count} baseline years"
        )
        return AnomalyReport(
            baseline=baseline,
            seasonal_averages=tuple(seasonal_averages),
            anomalies=tuple(anomalies),
            decade_anomalies=tuple(decade_anomalies),
        )
