"""Use cases - core business operations."""

from .normalize_readings import NormalizeReadingsUseCase, normalize_row
from .grouping import fold_by, group_by, merge_groups
from .build_monthly_climatology import BuildMonthlyClimatologyUseCase
from .build_yearly_trend import BuildYearlyTrendUseCase, first_year_above
from .calculate_seasonal_anomalies import CalculateSeasonalAnomaliesUseCase
from .classify_extreme_days import ClassifyExtremeDaysUseCase
from .smooth_annual_cycle import SmoothAnnualCycleUseCase

__all__ = [
    "NormalizeReadingsUseCase",
    "normalize_row",
    "fold_by",
    "group_by",
    "merge_groups",
    "BuildMonthlyClimatologyUseCase",
    "BuildYearlyTrendUseCase",
    "first_year_above",
    "CalculateSeasonalAnomaliesUseCase",
    "ClassifyExtremeDaysUseCase",
    "SmoothAnnualCycleUseCase",
]
