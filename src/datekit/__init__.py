# src/datekit/__init__.py
"""
datekit
~~~~~~~

Calendar-aware date helpers: day/week/month arithmetic, calendar-aligned
intervals and their navigation, weekdays, and civil-day keys.

Subpackages
-----------
datekit.calendar   Calendar configuration and primitives.
datekit.interval   Interval and next/previous/offset navigation.
datekit.dates      Point arithmetic, boundaries, day counting, predicates.
datekit.weekday    Weekday enum and display symbols.
datekit.datekey    DateKey civil-day identity.
"""

from __future__ import annotations

from datekit.calendar import Calendar, CalendarError
from datekit.interval import Interval, OffsetDirection
from datekit.units import CalendarUnit, DateComponents
from datekit.weekday import Symbols, Weekday
from datekit.datekey import DateKey

__all__ = [
    "Calendar",
    "CalendarError",
    "CalendarUnit",
    "DateComponents",
    "DateKey",
    "Interval",
    "OffsetDirection",
    "Symbols",
    "Weekday",
]
