from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from datekit.units import CalendarUnit
from datekit.weekday.symbols import Symbols, default_symbols

if TYPE_CHECKING:
    from datekit.calendar import Calendar


class Weekday(IntEnum):
    """
    Day of the week, numbered as calendars report it (Sunday=1 ... Saturday=7).

    The numbering is fixed and independent of the first day of the week.
    """

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @classmethod
    def safe(cls, raw: int, fallback: Optional[Weekday] = None) -> Weekday:
        """Weekday for `raw`, or `fallback` (Sunday by default) when out of 1..7."""
        try:
            return cls(raw)
        except ValueError:
            return cls.SUNDAY if fallback is None else fallback

    @classmethod
    def of(cls, point: datetime, *, calendar: Calendar) -> Weekday:
        return cls(calendar.component(CalendarUnit.WEEKDAY, point))

    def is_today(self, now: Optional[datetime] = None, *, calendar: Calendar) -> bool:
        return Weekday.of(now if now is not None else calendar.now(), calendar=calendar) is self

    # ── neighbours ───────────────────────────────────────────────────────

    @property
    def next(self) -> Weekday:
        return Weekday(self.value % 7 + 1)

    @property
    def previous(self) -> Weekday:
        return Weekday((self.value - 2) % 7 + 1)

    # ── indices ──────────────────────────────────────────────────────────

    @property
    def index_monday_first(self) -> int:
        """
        Position in a Monday-first week: Monday=0 ... Sunday=6.

        The Sunday-first position is `symbol_index`.
        """
        return (self.value + 5) % 7

    @property
    def symbol_index(self) -> int:
        """Position in a Sunday-first symbol table."""
        return self.value - 1

    # ── symbols ──────────────────────────────────────────────────────────

    def full_symbol(self, symbols: Optional[Symbols] = None) -> str:
        return (symbols or default_symbols()).weekdays[self.symbol_index]

    def short_symbol(self, symbols: Optional[Symbols] = None) -> str:
        return (symbols or default_symbols()).short_weekdays[self.symbol_index]

    def very_short_symbol(self, symbols: Optional[Symbols] = None) -> str:
        return (symbols or default_symbols()).very_short_weekdays[self.symbol_index]


def weekday_names(calendar: Calendar) -> list[str]:
    """Short weekday names starting at the calendar's first weekday."""
    names = list(calendar.symbols.short_weekdays)
    shift = calendar.first_weekday - 1
    return names[shift:] + names[:shift]


def month_names(calendar: Calendar) -> list[str]:
    return list(calendar.symbols.months)
