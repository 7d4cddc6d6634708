"""Raw row and normalized reading entities."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from .season import Season


@dataclass(frozen=True)
class RawRow:
    """One unvalidated input row: a timestamp string and a Kelvin temperature."""

    time: Optional[str]
    temperature_k: Any = None


@dataclass(frozen=True)
class Reading:
    """Represents one valid daily temperature observation."""

    date: date
    year: int
    month: int  # 0 = January
    day_of_year: int  # 1-366
    season: Season
    temp_f: float
