"""Meteorological season enumeration."""

from enum import Enum


class Season(str, Enum):
    """Meteorological season, defined by fixed calendar groupings."""

    WINTER = "Winter"
    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"

    @property
    def field_name(self) -> str:
        """Attribute name used for this season on seasonal records."""
        return self.value.lower()

    @classmethod
    def from_month(cls, month: int) -> "Season":
        """
        Classify a 0-based month (0 = January).

        Dec/Jan/Feb are Winter, Mar-May Spring, Jun-Aug Summer, Sep-Nov Fall.
        """
        if not 0 <= month <= 11:
            raise ValueError(f"Month index out of range: {month}")
        if month in (11, 0, 1):
            return cls.WINTER
        if month <= 4:
            return cls.SPRING
        if month <= 7:
            return cls.SUMMER
        return cls.FALL

    @classmethod
    def from_day_of_year(cls, day_of_year: int) -> "Season":
        """
        Classify a 1-based day of year with the fixed boundary table.

        Winter = 1-59 or 335-366, Spring = 60-151, Summer = 152-243,
        Fall = 244-334. Boundaries do not shift in leap years.
        """
        if not 1 <= day_of_year <= 366:
            raise ValueError(f"Day of year out of range: {day_of_year}")
        if day_of_year <= 59 or day_of_year >= 335:
            return cls.WINTER
        if day_of_year <= 151:
            return cls.SPRING
        if day_of_year <= 243:
            return cls.SUMMER
        return cls.FALL

    def __str__(self) -> str:
        return self.value
