"""Full pipeline output entity."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from .analysis_settings import AnalysisSettings
from .annual_cycle import AnnualCyclePoint
from .anomaly import AnomalyReport
from .extreme_days import ExtremeDayStats
from .monthly_profile import MonthlyClimatology
from .trend import TrendSummary


@dataclass(frozen=True)
class ClimateReport:
    """Every statistic derived from one pass over the input."""

    settings: AnalysisSettings
    reading_count: int
    discarded_count: int
    monthly: MonthlyClimatology
    trend: TrendSummary
    anomalies: AnomalyReport
    extremes: Tuple[ExtremeDayStats, ...]
    annual_cycle: Tuple[AnnualCyclePoint, ...]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form, including derived labels and month names."""
        return {
            "settings": asdict(self.settings),
            "reading_count": self.reading_count,
            "discarded_count": self.discarded_count,
            "monthly": self.monthly.to_dict(),
            "trend": self.trend.to_dict(),
            "anomalies": self.anomalies.to_dict(),
            "extremes": [stats.to_dict() for stats in self.extremes],
            "annual_cycle": [asdict(point) for point in self.annual_cycle],
        }
