"""Use case for counting extremely hot and cold days per decade."""

import logging
from typing import List, Sequence

from ..entities.extreme_days import ExtremeDayStats, ExtremeDayTally
from ..entities.reading import Reading
from .grouping import by_decade, fold_by

logger = logging.getLogger(__name__)


class ClassifyExtremeDaysUseCase:
    """Use case to tally days beyond heat and cold thresholds, by decade."""

    def __init__(self, hot_threshold: float = 90.0, cold_threshold: float = 20.0):
        """
        Initialize use case.

        Args:
            hot_threshold: Days strictly above this (°F) are extremely hot
            cold_threshold: Days strictly below this (°F) are extremely cold
        """
        if cold_threshold >= hot_threshold:
            raise ValueError(
                f"cold_threshold ({cold_threshold}) must be below hot_threshold ({hot_threshold})"
            )
        self.hot_threshold = hot_threshold
        self.cold_threshold = cold_threshold

    def _tally(self, tally: ExtremeDayTally, reading: Reading) -> ExtremeDayTally:
        return tally + ExtremeDayTally(
            hot_days=int(reading.temp_f > self.hot_threshold),
            cold_days=int(reading.temp_f < self.cold_threshold),
            total_days=1,
        )

    def execute(self, readings: Sequence[Reading]) -> List[ExtremeDayStats]:
        """
        Execute the classification.

        Args:
            readings: Normalized readings

        Returns:
            ExtremeDayStats per decade, ascending
        """
        tallies = fold_by(readings, by_decade, ExtremeDayTally(), self._tally)

        stats = [
            ExtremeDayStats(
                decade=decade,
                hot_days=tally.hot_days,
                cold_days=tally.cold_days,
                total_days=tally.total_days,
                hot_pct=tally.hot_days / tally.total_days * 100,
                cold_pct=tally.cold_days / tally.total_days * 100,
            )
            for decade, tally in sorted(tallies.items())
        ]
        logger.info(
            f"Classified extreme days (>{self.hot_threshold}°F, <{self.cold_threshold}°F) "
            f"across {len(stats)} decades"
        )
        return stats
