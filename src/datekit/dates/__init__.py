# src/datekit/dates/__init__.py
"""
datekit.dates
~~~~~~~~~~~~~

Calendar arithmetic on points in time (``datetime`` objects).  Every
function that needs civil components takes an explicit ``calendar=``.

Boundaries are exclusive: ``end_of_day`` is midnight starting the next day
and ``end_of_month`` the 1st of the next month, so they compose with
intervals and with ``is_between(..., inclusive=False)``.

Basic usage::

    from datetime import datetime
    from datekit.calendar import Calendar
    from datekit import dates
    from datekit.units import CalendarUnit

    cal = Calendar.named("Europe/Paris")
    p = datetime(2024, 3, 20, 13, 16, 49)
    dates.add(p, 1, CalendarUnit.MONTH, calendar=cal)      # 2024-04-20 13:16:49+02:00
    dates.number_of_days_in_month(p, calendar=cal)         # 31
    dates.yesterday(p, calendar=cal)                       # 2024-03-19 00:00+01:00

Functions that historically returned their input when the calendar could
not compute a result raise CalendarError instead; pass ``lenient=True`` to
get the input back.

Day counts accept arrays::

    dates.count_days_between(starts, ends, calendar=cal)   # → int64 ndarray
"""

from __future__ import annotations

from datekit.dates.dates import (
    SECONDS_IN_DAY,
    add,
    count_days_between,
    day_interval,
    day_number,
    days_from,
    days_to,
    duration,
    end_of_day,
    end_of_month,
    first_weekday_before_start_of_month,
    is_between,
    is_future,
    is_past,
    is_same,
    month_interval,
    month_number,
    number_of_complete_weeks_in_month,
    number_of_days_in_month,
    number_of_incomplete_weeks_in_month,
    number_of_weeks_in_month,
    previous_day_interval,
    start_of_day,
    start_of_month,
    start_of_previous_month,
    subtract,
    this_month_interval,
    this_week_interval,
    this_year_interval,
    today_interval,
    week_interval,
    year_interval,
    year_number,
    yesterday,
    yesterday_interval,
)

__all__ = [
    "SECONDS_IN_DAY",
    "add",
    "count_days_between",
    "day_interval",
    "day_number",
    "days_from",
    "days_to",
    "duration",
    "end_of_day",
    "end_of_month",
    "first_weekday_before_start_of_month",
    "is_between",
    "is_future",
    "is_past",
    "is_same",
    "month_interval",
    "month_number",
    "number_of_complete_weeks_in_month",
    "number_of_days_in_month",
    "number_of_incomplete_weeks_in_month",
    "number_of_weeks_in_month",
    "previous_day_interval",
    "start_of_day",
    "start_of_month",
    "start_of_previous_month",
    "subtract",
    "this_month_interval",
    "this_week_interval",
    "this_year_interval",
    "today_interval",
    "week_interval",
    "year_interval",
    "year_number",
    "yesterday",
    "yesterday_interval",
]
