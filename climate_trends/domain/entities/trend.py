"""Yearly and decade trend entities."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple


def decade_of(year: int) -> int:
    """Decade label of a year, e.g. 1987 -> 1980."""
    return (year // 10) * 10


@dataclass(frozen=True)
class YearlyPoint:
    """Average temperature of one year."""

    year: int
    average: float
    count: int
    is_above_threshold: bool


@dataclass(frozen=True)
class DecadePoint:
    """Unweighted mean of the yearly averages within one decade."""

    decade: int
    average: float
    year_count: int
    is_above_threshold: bool

    @property
    def label(self) -> str:
        return f"{self.decade}s"

    def to_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "label": self.label}


@dataclass(frozen=True)
class TrendSummary:
    """Yearly and decade averages tagged against a single threshold."""

    threshold: float
    yearly: Tuple[YearlyPoint, ...]
    decades: Tuple[DecadePoint, ...]
    first_year_above: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "decades": [decade.to_dict() for decade in self.decades]}
