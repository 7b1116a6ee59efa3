from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import TYPE_CHECKING, Optional

from datekit._exceptions import CalendarError
from datekit.units import CalendarUnit

if TYPE_CHECKING:
    from datekit.calendar import Calendar

logger = logging.getLogger(__name__)

# Coarsest first.
_CLASSIFY_ORDER: tuple[CalendarUnit, ...] = (
    CalendarUnit.YEAR,
    CalendarUnit.MONTH,
    CalendarUnit.WEEK_OF_YEAR,
    CalendarUnit.DAY,
    CalendarUnit.HOUR,
    CalendarUnit.MINUTE,
    CalendarUnit.SECOND,
)


class OffsetDirection(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


def _elapsed(start: datetime, end: datetime) -> timedelta:
    # Aware datetimes sharing a tzinfo subtract by wall clock; go through UTC.
    if start.tzinfo is None or end.tzinfo is None:
        return end - start
    return end.astimezone(timezone.utc) - start.astimezone(timezone.utc)


def _shift(point: datetime, delta: timedelta) -> datetime:
    if point.tzinfo is None:
        return point + delta
    return (point.astimezone(timezone.utc) + delta).astimezone(point.tzinfo)


@dataclass(frozen=True, slots=True)
class Interval:
    """
    Span of time between two points, start <= end.

    Navigation treats `end` as exclusive: the end of a day interval is the
    start of the next day.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"Interval end must not precede start; got {self.start} > {self.end}."
            )

    # ── construction ─────────────────────────────────────────────────────

    @classmethod
    def get(cls, first: Optional[datetime], last: Optional[datetime]) -> Optional[Interval]:
        """Interval spanning two points in either order; None if absent or equal."""
        if first is None or last is None or first == last:
            return None
        return cls(min(first, last), max(first, last))

    # ── properties ───────────────────────────────────────────────────────

    @property
    def duration(self) -> timedelta:
        return _elapsed(self.start, self.end)

    def contains(self, point: datetime) -> bool:
        return self.start <= point <= self.end

    # ── navigation ───────────────────────────────────────────────────────

    def calendar_unit(self, calendar: Calendar) -> Optional[CalendarUnit]:
        """The unit whose calendar interval at `start` is exactly this one, if any."""
        try:
            local = Interval(calendar.localize(self.start), calendar.localize(self.end))
        except CalendarError:
            return None
        for unit in _CLASSIFY_ORDER:
            try:
                if calendar.interval_of(unit, local.start) == local:
                    return unit
            except CalendarError:
                continue
        return None

    def next(self, calendar: Calendar) -> Interval:
        unit = self.calendar_unit(calendar)
        if unit is None:
            logger.debug(f"Unclassified interval {self}, offsetting forward")
            return self.offset_by_same_length(OffsetDirection.FORWARD)
        return self._same_form(calendar.interval_of(unit, self.end))

    def previous(self, calendar: Calendar) -> Interval:
        unit = self.calendar_unit(calendar)
        if unit is None:
            logger.debug(f"Unclassified interval {self}, offsetting backward")
            return self.offset_by_same_length(OffsetDirection.BACKWARD)
        try:
            previous_start = calendar.add(unit, -1, self.start)
        except CalendarError as e:
            logger.debug(f"Cannot step {unit.value} back from {self.start}: {e}")
            return self.offset_by_same_length(OffsetDirection.BACKWARD)
        return self._same_form(calendar.interval_of(unit, previous_start))

    def _same_form(self, other: Interval) -> Interval:
        # Naive in, naive out: wall times in the calendar's zone.
        if self.start.tzinfo is None:
            return Interval(other.start.replace(tzinfo=None), other.end.replace(tzinfo=None))
        return other

    def offset_by_same_length(self, direction: OffsetDirection) -> Interval:
        duration = self.duration
        if direction is OffsetDirection.FORWARD:
            return Interval(self.end, _shift(self.end, duration))
        return Interval(_shift(self.start, -duration), self.start)

    def __repr__(self) -> str:
        return f"Interval(start={self.start.isoformat()}, end={self.end.isoformat()})"
