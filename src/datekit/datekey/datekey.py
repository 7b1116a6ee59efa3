from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from datekit.units import CalendarUnit

if TYPE_CHECKING:
    from datekit.calendar import Calendar

_DAY_UNITS = (CalendarUnit.YEAR, CalendarUnit.MONTH, CalendarUnit.DAY)


@dataclass(frozen=True, slots=True)
class DateKey:
    """
    Civil-day identity of a point: equal for every point of the same day.

    `id` is ``YYYY-MM-DD``.  When a component cannot be extracted (reported
    as 0) the id is derived from the instant instead, so distinct points
    never collide on a bogus date.
    """

    id: str
    year: int
    month: int
    day: int

    @classmethod
    def from_point(cls, point: datetime, *, calendar: Calendar) -> DateKey:
        c = calendar.components(point, _DAY_UNITS)
        year, month, day = c.year or 0, c.month or 0, c.day or 0
        if 0 in (year, month, day):
            key = f"invalid-{calendar.localize(point).timestamp()}"
        else:
            key = f"{year:04d}-{month:02d}-{day:02d}"
        return cls(key, year, month, day)

    def __str__(self) -> str:
        return self.id
