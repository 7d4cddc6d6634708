"""Annual temperature cycle entity."""

from dataclasses import dataclass
from typing import Optional

from .season import Season


@dataclass(frozen=True)
class AnnualCyclePoint:
    """Average temperature of one day of year, pooled across all years."""

    day_of_year: int
    raw_average: Optional[float]
    smoothed_average: Optional[float]
    count: int
    season: Season
