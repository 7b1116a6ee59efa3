# src/datekit/weekday/__init__.py
"""
datekit.weekday
~~~~~~~~~~~~~~~

Days of the week and their display names.

Weekday values follow the calendar numbering (Sunday=1 ... Saturday=7) no
matter which day a calendar starts its weeks on.  Display names come from a
Symbols table built once from the host locale's CLDR data (babel), or
injected by the caller.

Basic usage::

    from datekit.weekday import Weekday, weekday_names

    Weekday.SATURDAY.next            # → Weekday.SUNDAY
    Weekday.safe(9)                  # → Weekday.SUNDAY (fallback)
    Weekday.MONDAY.short_symbol()    # → "Mon" in an English locale
    weekday_names(cal)               # short names, cal.first_weekday first

Public API
----------
Weekday          The seven days, with neighbours, indices and symbols.
Symbols          Weekday and month display names.
default_symbols  The host-locale Symbols, built on first use.
weekday_names    Short weekday names rotated to a calendar's first weekday.
month_names      Full month names of a calendar's symbols.
"""

from __future__ import annotations

from datekit.weekday.symbols import Symbols, default_symbols
from datekit.weekday.weekday import Weekday, month_names, weekday_names

__all__ = [
    "Symbols",
    "Weekday",
    "default_symbols",
    "month_names",
    "weekday_names",
]
