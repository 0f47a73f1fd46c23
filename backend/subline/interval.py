"""Recurrence interval shared by subscriptions and their line items."""

from dataclasses import dataclass
from enum import Enum


class IntervalUnits(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class Interval:
    """How often something recurs, e.g. ``Interval(2, IntervalUnits.WEEK)``."""

    length: int | None
    units: IntervalUnits = IntervalUnits.MONTH

    @classmethod
    def from_columns(cls, length: int | None, units: str | None) -> "Interval":
        return cls(length=length, units=IntervalUnits(units or IntervalUnits.MONTH.value))

    @property
    def is_positive(self) -> bool:
        return self.length is not None and self.length > 0


def resolve_interval(own: Interval | None, parent: Interval | None) -> Interval | None:
    """Return the interval that governs a record.

    A parent (subscription) interval always wins over the record's own.
    """
    if parent is not None:
        return parent
    return own
