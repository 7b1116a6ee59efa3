# src/datekit/interval/__init__.py
"""
datekit.interval
~~~~~~~~~~~~~~~~

Spans of time and navigation between calendar-aligned spans.  An Interval
that matches a calendar unit exactly (a whole day, week, month, ...) steps
to the neighbouring unit; any other interval steps by its own length.

Basic usage::

    from datetime import datetime

    from datekit.calendar import Calendar
    from datekit.interval import Interval
    from datekit.units import CalendarUnit

    cal = Calendar.named("Europe/Paris", first_weekday=2)
    march = cal.interval_of(CalendarUnit.MONTH, datetime(2024, 3, 20))
    april = march.next(cal)                 # 2024-04-01 .. 2024-05-01
    span = Interval.get(a, b)               # None when a == b

Public API
----------
Interval          Ordered (start, end) pair with navigation helpers.
OffsetDirection   FORWARD / BACKWARD for offset_by_same_length().
"""

from __future__ import annotations

from datekit.interval.interval import Interval, OffsetDirection

__all__ = [
    "Interval",
    "OffsetDirection",
]
