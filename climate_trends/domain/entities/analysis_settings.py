"""Analysis settings entity."""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict


@dataclass(frozen=True)
class AnalysisSettings:
    """Parameters of one pipeline run (temperatures in °F)."""

    threshold_temp: float = 55.0
    baseline_start_year: int = 1951
    baseline_end_year: int = 1980
    hot_threshold: float = 90.0
    cold_threshold: float = 20.0
    smoothing_window_radius: int = 3

    def __post_init__(self):
        if self.baseline_start_year > self.baseline_end_year:
            raise ValueError(
                f"Baseline window is inverted: {self.baseline_start_year}-{self.baseline_end_year}"
            )
        if self.cold_threshold >= self.hot_threshold:
            raise ValueError(
                f"cold_threshold ({self.cold_threshold}) must be below "
                f"hot_threshold ({self.hot_threshold})"
            )
        if self.smoothing_window_radius < 0:
            raise ValueError(
                f"smoothing_window_radius must be >= 0, got {self.smoothing_window_radius}"
            )

    @classmethod
    def from_dict(cls, definition: Dict[str, Any]) -> "AnalysisSettings":
        """Create settings from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in definition.items() if key in known})

    def override(self, **changes: Any) -> "AnalysisSettings":
        """Copy with the given non-None values replaced."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})
