# src/datekit/datekey/__init__.py
"""
datekit.datekey
~~~~~~~~~~~~~~~

Group points by civil day::

    from datekit.datekey import DateKey

    key = DateKey.from_point(event.start, calendar=cal)
    by_day.setdefault(key, []).append(event)
    str(key)                          # → "2024-03-20"

Public API
----------
DateKey  Hashable (year, month, day) identity of a point under a calendar.
"""

from __future__ import annotations

from datekit.datekey.datekey import DateKey

__all__ = ["DateKey"]
