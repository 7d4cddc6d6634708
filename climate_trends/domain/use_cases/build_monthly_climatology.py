"""Use case for building monthly temperature profiles."""

import logging
from typing import Callable, List, Mapping, Optional, Sequence

from ..entities.aggregate import Aggregate
from ..entities.monthly_profile import MonthlyClimatology, MonthlyPoint, MonthlyProfile
from ..entities.reading import Reading
from .grouping import by_year_month, group_by, merge_groups

logger = logging.getLogger(__name__)


def _profile(year: Optional[int], aggregate_for: Callable[[int], Aggregate]) -> MonthlyProfile:
    points = []
    for month in range(12):
        aggregate = aggregate_for(month)
        points.append(MonthlyPoint(month=month, average=aggregate.average, count=aggregate.count))
    return MonthlyProfile(year=year, points=tuple(points))


class BuildMonthlyClimatologyUseCase:
    """Use case to average temperatures per calendar month, per year and all-time."""

    def execute(self, readings: Sequence[Reading]) -> MonthlyClimatology:
        """
        Execute the monthly aggregation.

        The all-time profile pools the per-year sums and counts, so every day
        carries equal weight regardless of how complete its year is.

        Args:
            readings: Normalized readings

        Returns:
            MonthlyClimatology with one profile per year present
        """
        year_month_groups = group_by(readings, by_year_month)
        years = sorted({year for year, _ in year_month_groups})
        logger.info(f"Building monthly profiles for {len(years)} years")

        profiles: List[MonthlyProfile] = []
        per_year_by_month: List[Mapping[int, Aggregate]] = []
        for year in years:
            months = {
                month: aggregate
                for (group_year, month), aggregate in year_month_groups.items()
                if group_year == year
            }
            per_year_by_month.append(months)
            profiles.append(_profile(year, lambda month: months.get(month, Aggregate())))

        pooled = merge_groups(*per_year_by_month)
        all_years = _profile(None, lambda month: pooled.get(month, Aggregate()))

        return MonthlyClimatology(
            profiles=tuple(profiles),
            all_years=all_years,
            min_year=years[0] if years else None,
            max_year=years[-1] if years else None,
        )
