"""Use case for yearly and decade temperature trends."""

import logging
from typing import Iterable, List, Optional, Sequence

from ..entities.aggregate import Aggregate
from ..entities.reading import Reading
from ..entities.trend import DecadePoint, TrendSummary, YearlyPoint, decade_of
from .grouping import by_year, fold_by, group_by

logger = logging.getLogger(__name__)


def first_year_above(points: Iterable[YearlyPoint], threshold: float) -> Optional[int]:
    """
    Find the first year whose average exceeds the threshold.

    Args:
        points: Yearly points sorted ascending by year
        threshold: Temperature threshold (strict comparison)

    Returns:
        The earliest qualifying year, or None if no year qualifies
    """
    return next((point.year for point in points if point.average > threshold), None)


class BuildYearlyTrendUseCase:
    """Use case to compute yearly and decade averages against a threshold."""

    def __init__(self, threshold: float = 55.0):
        """
        Initialize use case.

        Args:
            threshold: Temperature (°F) a year or decade must exceed
        """
        self.threshold = threshold

    def _yearly_points(self, readings: Sequence[Reading]) -> List[YearlyPoint]:
        by_year_groups = group_by(readings, by_year)
        return [
            YearlyPoint(
                year=year,
                average=aggregate.average,
                count=aggregate.count,
                is_above_threshold=aggregate.average > self.threshold,
            )
            for year, aggregate in sorted(by_year_groups.items())
        ]

    def _decade_points(self, yearly: Sequence[YearlyPoint]) -> List[DecadePoint]:
        # Each year weighs the same regardless of how many days it contributed.
        by_decade_groups = fold_by(
            yearly,
            lambda point: decade_of(point.year),
            Aggregate(),
            lambda aggregate, point: aggregate.add(point.average),
        )
        return [
            DecadePoint(
                decade=decade,
                average=aggregate.average,
                year_count=aggregate.count,
                is_above_threshold=aggregate.average > self.threshold,
            )
            for decade, aggregate in sorted(by_decade_groups.items())
        ]

    def execute(self, readings: Sequence[Reading]) -> TrendSummary:
        """
        Execute the trend computation.

        Args:
            readings: Normalized readings

        Returns:
            TrendSummary with yearly points, decade points and first crossing year
        """
        yearly = self._yearly_points(readings)
        decades = self._decade_points(yearly)
        first_year = first_year_above(yearly, self.threshold)

        if first_year is None:
            logger.info(f"No yearly average exceeds {self.threshold}°F")
        else:
            logger.info(f"First year above {self.threshold}°F: {first_year}")

        return TrendSummary(
            threshold=self.threshold,
            yearly=tuple(yearly),
            decades=tuple(decades),
            first_year_above=first_year,
        )
