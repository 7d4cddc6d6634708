"""Extreme temperature day entities."""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ExtremeDayTally:
    """Running hot/cold/total day counts for one group."""

    hot_days: int = 0
    cold_days: int = 0
    total_days: int = 0

    def __add__(self, other: "ExtremeDayTally") -> "ExtremeDayTally":
        if not isinstance(other, ExtremeDayTally):
            return NotImplemented
        return ExtremeDayTally(
            self.hot_days + other.hot_days,
            self.cold_days + other.cold_days,
            self.total_days + other.total_days,
        )


@dataclass(frozen=True)
class ExtremeDayStats:
    """Frequency of extremely hot and cold days within one decade."""

    decade: int
    hot_days: int
    cold_days: int
    total_days: int
    hot_pct: float
    cold_pct: float

    @property
    def label(self) -> str:
        return f"{self.decade}s"

    def to_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "label": self.label}
