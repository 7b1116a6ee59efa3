# src/datekit/calendar/__init__.py
"""
datekit.calendar
~~~~~~~~~~~~~~~~

Calendar configuration and the primitives the rest of datekit builds on.
A Calendar splits a datetime into civil components (year, month, day,
week, ...) under a time zone and a first-day-of-week convention, adds
calendar units, and computes the interval of a unit holding a point.

Basic usage::

    from datetime import datetime
    from datekit.calendar import Calendar
    from datekit.units import CalendarUnit

    cal = Calendar.named("Europe/Paris", first_weekday=2)   # Monday-first
    week = cal.interval_of(CalendarUnit.WEEK_OF_YEAR, datetime(2024, 3, 20))
    later = cal.add(CalendarUnit.MONTH, 1, datetime(2024, 1, 31))  # → Feb 29

There is no process-wide default: build one Calendar at the application
boundary (``Calendar.current()`` follows the host settings) and pass it
explicitly.

Public API
----------
Calendar       The calendar configuration and provider.
CalendarError  Raised when a calendar cannot compute a result.
raw_weekday    Weekday number of a date with Sunday=1 ... Saturday=7.
"""

from __future__ import annotations

from datekit._exceptions import CalendarError
from datekit.calendar.calendar import Calendar, raw_weekday

__all__ = [
    "Calendar",
    "CalendarError",
    "raw_weekday",
]
