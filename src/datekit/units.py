from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Mapping


class CalendarUnit(str, Enum):
    """Granularity of a calendar quantity; values match DateComponents field names."""

    YEAR = "year"
    MONTH = "month"
    WEEK_OF_YEAR = "week_of_year"
    WEEK_OF_MONTH = "week_of_month"
    WEEKDAY = "weekday"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    NANOSECOND = "nanosecond"


@dataclass(frozen=True, slots=True)
class DateComponents:
    """
    Partial breakdown of a point (or of a difference between two points).

    Only the requested units are populated; the others stay None.
    """

    year: int | None = None
    month: int | None = None
    week_of_year: int | None = None
    week_of_month: int | None = None
    weekday: int | None = None
    day: int | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    nanosecond: int | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[CalendarUnit, int]) -> DateComponents:
        return cls(**{unit.value: int(v) for unit, v in values.items()})

    def value(self, unit: CalendarUnit) -> int | None:
        return getattr(self, unit.value)

    def negated(self) -> DateComponents:
        return DateComponents(**{
            f.name: (None if getattr(self, f.name) is None else -getattr(self, f.name))
            for f in fields(self)
        })


# Units kept when truncating a point to a granularity.
_DAY_UNITS = frozenset({CalendarUnit.YEAR, CalendarUnit.MONTH, CalendarUnit.DAY})

GRANULARITY_UNITS: dict[CalendarUnit, frozenset[CalendarUnit]] = {
    CalendarUnit.DAY: _DAY_UNITS,
    CalendarUnit.HOUR: _DAY_UNITS | {CalendarUnit.HOUR},
    CalendarUnit.MINUTE: _DAY_UNITS | {CalendarUnit.HOUR, CalendarUnit.MINUTE},
    CalendarUnit.SECOND: _DAY_UNITS | {
        CalendarUnit.HOUR, CalendarUnit.MINUTE, CalendarUnit.SECOND,
    },
    CalendarUnit.NANOSECOND: _DAY_UNITS | {
        CalendarUnit.HOUR, CalendarUnit.MINUTE, CalendarUnit.SECOND,
        CalendarUnit.NANOSECOND,
    },
}

DEFAULT_DURATION_UNITS = frozenset(
    {CalendarUnit.HOUR, CalendarUnit.MINUTE, CalendarUnit.SECOND}
)
