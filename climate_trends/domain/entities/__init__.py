"""Domain entities."""

from .season import Season
from .reading import RawRow, Reading
from .aggregate import Aggregate
from .monthly_profile import MonthlyPoint, MonthlyProfile, MonthlyClimatology
from .trend import YearlyPoint, DecadePoint, TrendSummary, decade_of
from .anomaly import (
    SeasonalAverages,
    Baseline,
    SeasonalAnomaly,
    DecadeAnomaly,
    AnomalyReport,
)
from .extreme_days import ExtremeDayTally, ExtremeDayStats
from .annual_cycle import AnnualCyclePoint
from .analysis_settings import AnalysisSettings
from .climate_report import ClimateReport

__all__ = [
    "Season",
    "RawRow",
    "Reading",
    "Aggregate",
    "MonthlyPoint",
    "MonthlyProfile",
    "MonthlyClimatology",
    "YearlyPoint",
    "DecadePoint",
    "TrendSummary",
    "decade_of",
    "SeasonalAverages",
    "Baseline",
    "SeasonalAnomaly",
    "DecadeAnomaly",
    "AnomalyReport",
    "ExtremeDayTally",
    "ExtremeDayStats",
    "AnnualCyclePoint",
    "AnalysisSettings",
    "ClimateReport",
]
