"""Use case for the smoothed day-of-year temperature cycle."""

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..entities.aggregate import Aggregate
from ..entities.annual_cycle import AnnualCyclePoint
from ..entities.reading import Reading
from ..entities.season import Season
from .grouping import by_day_of_year, group_by

logger = logging.getLogger(__name__)

DAYS_IN_CYCLE = 366


def moving_average(values: Sequence[Optional[float]], radius: int) -> List[Optional[float]]:
    """
    Centered moving average that skips missing values.

    Only positions with ``radius`` neighbours on both sides are smoothed; the
    window never wraps around the ends, so the first and last ``radius``
    positions stay None. A window with no present value yields None.

    Args:
        values: Input series, None for missing
        radius: Half-width of the window (window size is 2 * radius + 1)

    Returns:
        Smoothed series of the same length
    """
    series = np.array([np.nan if value is None else value for value in values], dtype=float)
    smoothed: List[Optional[float]] = [None] * len(series)
    for index in range(radius, len(series) - radius):
        window = series[index - radius:index + radius + 1]
        present = window[~np.isnan(window)]
        if present.size:
            smoothed[index] = float(present.mean())
    return smoothed


class SmoothAnnualCycleUseCase:
    """Use case to pool readings by day of year and smooth the result."""

    def __init__(self, window_radius: int = 3):
        """
        Initialize use case.

        Args:
            window_radius: Days on each side of the centre (3 gives a 7-day window)
        """
        if window_radius < 0:
            raise ValueError(f"window_radius must be >= 0, got {window_radius}")
        self.window_radius = window_radius

    def execute(self, readings: Sequence[Reading]) -> List[AnnualCyclePoint]:
        """
        Execute the annual-cycle computation.

        Args:
            readings: Normalized readings

        Returns:
            366 AnnualCyclePoints, one per day of year
        """
        # Day 366 only collects leap years.
        by_day = group_by(readings, by_day_of_year)
        aggregates = [by_day.get(day, Aggregate()) for day in range(1, DAYS_IN_CYCLE + 1)]
        raw = [aggregate.average for aggregate in aggregates]
        smoothed = moving_average(raw, self.window_radius)

        logger.info(
            f"Smoothed annual cycle with a {2 * self.window_radius + 1}-day window "
            f"({sum(value is not None for value in raw)} days with data)"
        )
        return [
            AnnualCyclePoint(
                day_of_year=day,
                raw_average=raw[day - 1],
                smoothed_average=smoothed[day - 1],
                count=aggregates[day - 1].count,
                season=Season.from_day_of_year(day),
            )
            for day in range(1, DAYS_IN_CYCLE + 1)
        ]
