"""Aggregate (sum, count) entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Aggregate:
    """Running sum and count of a group's values."""

    sum: float = 0.0
    count: int = 0

    def add(self, value: float) -> "Aggregate":
        """Return a new aggregate including one more value."""
        return Aggregate(self.sum + value, self.count + 1)

    def __add__(self, other: "Aggregate") -> "Aggregate":
        if not isinstance(other, Aggregate):
            return NotImplemented
        return Aggregate(self.sum + other.sum, self.count + other.count)

    @property
    def average(self) -> Optional[float]:
        """Mean of the group, or None when it holds no observations."""
        if self.count == 0:
            return None
        return self.sum / self.count
