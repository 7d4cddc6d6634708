"""Monthly climatology entities."""

import calendar
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class MonthlyPoint:
    """Average temperature of one calendar month."""

    month: int  # 0 = January
    average: Optional[float]
    count: int = 0

    @property
    def month_name(self) -> str:
        return calendar.month_abbr[self.month + 1]

    def to_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "month_name": self.month_name}


@dataclass(frozen=True)
class MonthlyProfile:
    """Twelve monthly averages, for one year or pooled across all years (year=None)."""

    year: Optional[int]
    points: Tuple[MonthlyPoint, ...]

    def __post_init__(self):
        if len(self.points) != 12:
            raise ValueError(f"A monthly profile needs 12 points, got {len(self.points)}")

    @property
    def total_count(self) -> int:
        return sum(point.count for point in self.points)

    def to_dict(self) -> Dict[str, Any]:
        return {"year": self.year, "points": [point.to_dict() for point in self.points]}


@dataclass(frozen=True)
class MonthlyClimatology:
    """Per-year monthly profiles plus the all-time pooled profile."""

    profiles: Tuple[MonthlyProfile, ...]  # ascending by year
    all_years: MonthlyProfile
    min_year: Optional[int]
    max_year: Optional[int]

    def for_year(self, year: int) -> Optional[MonthlyProfile]:
        """Profile of a single year, or None if the year has no readings."""
        for profile in self.profiles:
            if profile.year == year:
                return profile
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profiles": [profile.to_dict() for profile in self.profiles],
            "all_years": self.all_years.to_dict(),
            "min_year": self.min_year,
            "max_year": self.max_year,
        }
