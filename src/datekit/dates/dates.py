import logging
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence, Union

import numpy as np

from datekit._exceptions import CalendarError
from datekit.calendar import Calendar
from datekit.interval import Interval
from datekit.units import (
    DEFAULT_DURATION_UNITS,
    GRANULARITY_UNITS,
    CalendarUnit,
    DateComponents,
)

logger = logging.getLogger(__name__)

Unit = CalendarUnit

PointLike = Union[datetime, Sequence[datetime], "np.ndarray"]

SECONDS_IN_DAY: int = 24 * 60 * 60


def _lenient(
    compute: Callable[[], datetime], point: datetime, lenient: bool, what: str
) -> datetime:
    try:
        return compute()
    except CalendarError as e:
        if not lenient:
            raise
        logger.debug(f"{what} failed for {point}, keeping it: {e}")
        return point


def _now_like(point: datetime) -> datetime:
    return datetime.now(point.tzinfo) if point.tzinfo is not None else datetime.now()


# ── arithmetic ───────────────────────────────────────────────────────────────

def add(
    point: datetime,
    value: int,
    unit: CalendarUnit = Unit.DAY,
    *,
    calendar: Calendar,
    lenient: bool = False,
) -> datetime:
    """
    Shift `point` by `value` calendar units (negative values go back).

    Years, months, weeks and days keep the wall-clock time and clamp to the
    month's end (Jan 31 + 1 month → Feb 28/29); hours and smaller count
    elapsed time.  Raises CalendarError when the result is out of range,
    unless `lenient`, in which case `point` is returned unchanged.
    """
    return _lenient(
        lambda: calendar.add(unit, value, point), point, lenient, f"Adding {value} {unit.value}"
    )


def subtract(
    point: datetime,
    value: int,
    unit: CalendarUnit = Unit.DAY,
    *,
    calendar: Calendar,
    lenient: bool = False,
) -> datetime:
    return add(point, -value, unit, calendar=calendar, lenient=lenient)


# ── day counting ─────────────────────────────────────────────────────────────

def _count_days(start: datetime, end: datetime, calendar: Calendar) -> int:
    a = calendar.start_of_day(start)
    b = calendar.start_of_day(end)
    if a >= b:
        return 0
    return (b.date() - a.date()).days


def count_days_between(
    start: PointLike, end: PointLike, *, calendar: Calendar
) -> Union[int, np.ndarray]:
    """
    Whole calendar days from the day of `start` to the day of `end`.

    Both points are truncated to the start of their day first; 0 when
    `start` is on or after `end`.  Sequences / arrays of datetimes are
    broadcast against each other and give an int64 array.
    """
    if np.ndim(start) == 0 and np.ndim(end) == 0:
        return _count_days(start, end, calendar)

    starts, ends = np.broadcast_arrays(
        np.asarray(start, dtype=object), np.asarray(end, dtype=object)
    )
    result = np.empty(starts.shape, dtype=np.int64)
    for idx in np.ndindex(starts.shape):
        result[idx] = _count_days(starts[idx], ends[idx], calendar)
    return result


def days_to(point: datetime, other: datetime, *, calendar: Calendar) -> int:
    """Days until `other`; 0 if `other` is not on a later day."""
    return _count_days(point, other, calendar)


def days_from(point: datetime, other: datetime, *, calendar: Calendar) -> int:
    """Days since `other`; 0 if `other` is not on an earlier day."""
    return _count_days(other, point, calendar)


# ── boundaries ───────────────────────────────────────────────────────────────

def start_of_day(point: datetime, *, calendar: Calendar, lenient: bool = False) -> datetime:
    return _lenient(lambda: calendar.start_of_day(point), point, lenient, "Start of day")


def end_of_day(point: datetime, *, calendar: Calendar, lenient: bool = False) -> datetime:
    """Midnight starting the next day: the exclusive upper bound of `point`'s day."""
    return _lenient(
        lambda: calendar.start_of_day(calendar.add(Unit.DAY, 1, point)),
        point,
        lenient,
        "End of day",
    )


def start_of_month(point: datetime, *, calendar: Calendar, lenient: bool = False) -> datetime:
    return _lenient(
        lambda: calendar.interval_of(Unit.MONTH, point).start, point, lenient, "Start of month"
    )


def end_of_month(point: datetime, *, calendar: Calendar, lenient: bool = False) -> datetime:
    """Midnight starting the next month: the exclusive upper bound of `point`'s month."""
    return _lenient(
        lambda: calendar.interval_of(Unit.MONTH, point).end, point, lenient, "End of month"
    )


def start_of_previous_month(
    point: datetime, *, calendar: Calendar, lenient: bool = False
) -> datetime:
    return _lenient(
        lambda: calendar.interval_of(Unit.MONTH, calendar.add(Unit.MONTH, -1, point)).start,
        point,
        lenient,
        "Start of previous month",
    )


def first_weekday_before_start_of_month(point: datetime, *, calendar: Calendar) -> datetime:
    """
    First day of the week holding the 1st of `point`'s month.

    This is the top-left cell of a month grid whose columns start at the
    calendar's first weekday; it is the 1st itself when the month starts on
    that weekday.
    """
    first = start_of_month(point, calendar=calendar)
    lead = (calendar.component(Unit.WEEKDAY, first) - calendar.first_weekday) % 7
    return subtract(first, lead, Unit.DAY, calendar=calendar)


# ── components ───────────────────────────────────────────────────────────────

def day_number(point: datetime, *, calendar: Calendar) -> int:
    return calendar.component(Unit.DAY, point)


def month_number(point: datetime, *, calendar: Calendar) -> int:
    return calendar.component(Unit.MONTH, point)


def year_number(point: datetime, *, calendar: Calendar) -> int:
    return calendar.component(Unit.YEAR, point)


def number_of_days_in_month(point: datetime, *, calendar: Calendar) -> int:
    return len(calendar.range_of(Unit.DAY, Unit.MONTH, point))


def number_of_complete_weeks_in_month(point: datetime, *, calendar: Calendar) -> int:
    """Whole seven-day spans between the start and the exclusive end of the month."""
    month = calendar.interval_of(Unit.MONTH, point)
    weeks = calendar.difference(month.start, month.end, (Unit.WEEK_OF_MONTH,))
    return weeks.week_of_month or 0


def number_of_incomplete_weeks_in_month(point: datetime, *, calendar: Calendar) -> int:
    """1 if the week holding the last day of the month has fewer than 7 days in it."""
    last_day = subtract(end_of_month(point, calendar=calendar), 1, Unit.DAY, calendar=calendar)
    days = calendar.range_of(Unit.DAY, Unit.WEEK_OF_MONTH, last_day)
    return 1 if len(days) < 7 else 0


def number_of_weeks_in_month(point: datetime, *, calendar: Calendar) -> int:
    return (
        number_of_complete_weeks_in_month(point, calendar=calendar)
        + number_of_incomplete_weeks_in_month(point, calendar=calendar)
    )


def duration(
    point: datetime,
    other: datetime,
    units: Iterable[CalendarUnit] = DEFAULT_DURATION_UNITS,
    *,
    calendar: Calendar,
) -> DateComponents:
    """Non-negative breakdown of the time between `point` and `other`, in either order."""
    a = calendar.localize(point)
    b = calendar.localize(other)
    return calendar.difference(min(a, b), max(a, b), units)


# ── predicates ───────────────────────────────────────────────────────────────

def is_between(
    point: datetime, start: datetime, end: datetime, *, inclusive: bool = True
) -> bool:
    """
    Whether `point` lies in [start, end], or [start, end) when not `inclusive`.

    A reversed range (start > end) is empty.
    """
    if start > end:
        return False
    if inclusive:
        return start <= point <= end
    return start <= point < end


def is_past(point: datetime, now: Optional[datetime] = None) -> bool:
    return point < (now if now is not None else _now_like(point))


def is_future(point: datetime, now: Optional[datetime] = None) -> bool:
    return point > (now if now is not None else _now_like(point))


def is_same(
    point: datetime,
    other: Optional[datetime],
    granularity: CalendarUnit = Unit.DAY,
    *,
    calendar: Calendar,
) -> bool:
    if other is None:
        return False
    return calendar.is_same(point, other, granularity)


def yesterday(
    point: datetime,
    granularity: CalendarUnit = Unit.DAY,
    *,
    calendar: Calendar,
) -> Optional[datetime]:
    """
    `point` truncated to `granularity`, one day earlier.

    With the default day granularity this is midnight starting the previous
    day.  None when the truncated point cannot be rebuilt.
    """
    units = GRANULARITY_UNITS.get(granularity, GRANULARITY_UNITS[Unit.DAY])
    try:
        truncated = calendar.date_from(calendar.components(point, units))
        return calendar.add(Unit.DAY, -1, truncated)
    except CalendarError as e:
        logger.debug(f"No yesterday for {point}: {e}")
        return None


# ── intervals ────────────────────────────────────────────────────────────────

def day_interval(point: datetime, *, calendar: Calendar) -> Interval:
    return calendar.interval_of(Unit.DAY, point)


def week_interval(point: datetime, *, calendar: Calendar) -> Interval:
    return calendar.interval_of(Unit.WEEK_OF_YEAR, point)


def month_interval(point: datetime, *, calendar: Calendar) -> Interval:
    return calendar.interval_of(Unit.MONTH, point)


def year_interval(point: datetime, *, calendar: Calendar) -> Interval:
    return calendar.interval_of(Unit.YEAR, point)


def previous_day_interval(point: datetime, *, calendar: Calendar) -> Interval:
    return calendar.interval_of(Unit.DAY, calendar.add(Unit.DAY, -1, point))


def today_interval(*, calendar: Calendar, now: Optional[datetime] = None) -> Interval:
    return day_interval(now if now is not None else calendar.now(), calendar=calendar)


def yesterday_interval(*, calendar: Calendar, now: Optional[datetime] = None) -> Interval:
    return previous_day_interval(now if now is not None else calendar.now(), calendar=calendar)


def this_week_interval(*, calendar: Calendar, now: Optional[datetime] = None) -> Interval:
    return week_interval(now if now is not None else calendar.now(), calendar=calendar)


def this_month_interval(*, calendar: Calendar, now: Optional[datetime] = None) -> Interval:
    return month_interval(now if now is not None else calendar.now(), calendar=calendar)


def this_year_interval(*, calendar: Calendar, now: Optional[datetime] = None) -> Interval:
    return year_interval(now if now is not None else calendar.now(), calendar=calendar)
