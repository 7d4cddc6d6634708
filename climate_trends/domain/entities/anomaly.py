"""Seasonal average, baseline and anomaly entities."""

from dataclasses import asdict, dataclass
from typing import Dict, Mapping, Optional, Tuple

from .season import Season


class SeasonalFields:
    """Accessors shared by records holding one optional value per season."""

    winter: Optional[float]
    spring: Optional[float]
    summer: Optional[float]
    fall: Optional[float]

    def get(self, season: Season) -> Optional[float]:
        return getattr(self, season.field_name)

    def by_season(self) -> Dict[Season, Optional[float]]:
        return {season: self.get(season) for season in Season}

    @staticmethod
    def season_kwargs(values: Mapping[Season, Optional[float]]) -> Dict[str, Optional[float]]:
        """Keyword arguments for a seasonal record; absent seasons become None."""
        return {season.field_name: values.get(season) for season in Season}

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class SeasonalAverages(SeasonalFields):
    """Average temperature of each season within one year."""

    year: int
    winter: Optional[float] = None
    spring: Optional[float] = None
    summer: Optional[float] = None
    fall: Optional[float] = None


@dataclass(frozen=True)
class Baseline(SeasonalFields):
    """Per-season reference averages over a fixed historical window."""

    start_year: int
    end_year: int
    year_count: int = 0  # years of the window present in the data
    winter: Optional[float] = None
    spring: Optional[float] = None
    summer: Optional[float] = None
    fall: Optional[float] = None


@dataclass(frozen=True)
class SeasonalAnomaly(SeasonalFields):
    """Deviation of a year's seasonal averages from the baseline."""

    year: int
    winter: Optional[float] = None
    spring: Optional[float] = None
    summer: Optional[float] = None
    fall: Optional[float] = None


@dataclass(frozen=True)
class DecadeAnomaly(SeasonalFields):
    """Mean seasonal anomaly of the years in one decade."""

    decade: int
    winter: Optional[float] = None
    spring: Optional[float] = None
    summer: Optional[float] = None
    fall: Optional[float] = None

    @property
    def label(self) -> str:
        return f"{self.decade}s"

    def to_dict(self) -> Dict[str, object]:
        return {**asdict(self), "label": self.label}


@dataclass(frozen=True)
class AnomalyReport:
    """Baseline plus per-year and per-decade seasonal anomalies."""

    baseline: Baseline
    seasonal_averages: Tuple[SeasonalAverages, ...]
    anomalies: Tuple[SeasonalAnomaly, ...]
    decade_anomalies: Tuple[DecadeAnomaly, ...]

    def to_dict(self) -> Dict[str, object]:
        return {
            "baseline": self.baseline.to_dict(),
            "seasonal_averages": [averages.to_dict() for averages in self.seasonal_averages],
            "anomalies": [anomaly.to_dict() for anomaly in self.anomalies],
            "decade_anomalies": [decade.to_dict() for decade in self.decade_anomalies],
        }
