"""Generic keyed reduction used by every aggregate view.

All views (by year, by month, by decade, by day of year, ...) are one fold
with a different key function. Combining is commutative and associative, so
partitions of the input can be grouped separately and merged.
"""

from types import MappingProxyType
from typing import Callable, Dict, Hashable, Iterable, Mapping, Tuple, TypeVar

from ..entities.aggregate import Aggregate
from ..entities.reading import Reading
from ..entities.season import Season
from ..entities.trend import decade_of

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")
A = TypeVar("A")


def fold_by(
    items: Iterable[T],
    key: Callable[[T], K],
    zero: A,
    combine: Callable[[A, T], A],
) -> Mapping[K, A]:
    """
    Fold items into one accumulator per key.

    Args:
        items: Values to group
        key: Extracts the group key from an item
        zero: Empty accumulator (must be immutable)
        combine: Returns a new accumulator with one more item folded in

    Returns:
        Read-only mapping of key to accumulator
    """
    groups: Dict[K, A] = {}
    for item in items:
        group_key = key(item)
        groups[group_key] = combine(groups.get(group_key, zero), item)
    return MappingProxyType(groups)


def group_by(readings: Iterable[Reading], key: Callable[[Reading], K]) -> Mapping[K, Aggregate]:
    """Sum and count temperatures per key."""
    return fold_by(readings, key, Aggregate(), lambda agg, reading: agg.add(reading.temp_f))


def merge_groups(*partials: Mapping[K, A]) -> Mapping[K, A]:
    """Merge grouped partitions; accumulators must support ``+``."""
    merged: Dict[K, A] = {}
    for partial in partials:
        for group_key, accumulator in partial.items():
            merged[group_key] = (
                merged[group_key] + accumulator if group_key in merged else accumulator
            )
    return MappingProxyType(merged)


# Key functions

def by_year(reading: Reading) -> int:
    return reading.year


def by_year_month(reading: Reading) -> Tuple[int, int]:
    return reading.year, reading.month


def by_year_season(reading: Reading) -> Tuple[int, Season]:
    return reading.year, reading.season


def by_decade(reading: Reading) -> int:
    return decade_of(reading.year)


def by_day_of_year(reading: Reading) -> int:
    return reading.day_of_year
