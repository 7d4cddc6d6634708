"""Use case for normalizing raw rows into typed readings."""

import logging
import math
from typing import Any, Iterable, List, Optional

import pandas as pd

from ..entities.reading import RawRow, Reading
from ..entities.season import Season

logger = logging.getLogger(__name__)


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """Convert Kelvin to Fahrenheit without rounding."""
    return (kelvin - 273.15) * (9 / 5) + 32


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_timestamp(value: Any) -> Optional[pd.Timestamp]:
    """Parse a timestamp field, returning None when absent or unparsable."""
    if _is_blank(value):
        return None
    try:
        timestamp = pd.to_datetime(value, errors="coerce")
    except (TypeError, ValueError, OverflowError):
        return None
    if timestamp is None or pd.isna(timestamp):
        return None
    return timestamp


def parse_temperature(value: Any) -> Optional[float]:
    """Parse a temperature field, returning None when absent, unparsable or non-finite."""
    if _is_blank(value):
        return None
    try:
        temperature = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(temperature):
        return None
    return temperature


def normalize_row(row: RawRow) -> Optional[Reading]:
    """
    Turn one raw row into a Reading.

    Args:
        row: Raw timestamp string and Kelvin temperature

    Returns:
        The normalized Reading, or None if the row must be discarded
    """
    timestamp = parse_timestamp(row.time)
    kelvin = parse_temperature(row.temperature_k)
    if timestamp is None or kelvin is None:
        return None

    month = timestamp.month - 1
    return Reading(
        date=timestamp.date(),
        year=timestamp.year,
        month=month,
        day_of_year=timestamp.dayofyear,
        season=Season.from_month(month),
        temp_f=kelvin_to_fahrenheit(kelvin),
    )


class NormalizeReadingsUseCase:
    """Use case to normalize a sequence of raw rows, dropping invalid ones."""

    def execute(self, rows: Iterable[RawRow]) -> List[Reading]:
        """
        Execute normalization.

        Args:
            rows: Raw rows as loaded from the data source

        Returns:
            List of valid Readings in input order
        """
        readings = [reading for reading in map(normalize_row, rows) if reading is not None]
        logger.info(f"Normalized {len(readings)} readings")
        return readings
