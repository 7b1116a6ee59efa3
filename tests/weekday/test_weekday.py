"""
tests/weekday/test_weekday.py

Covers:
  - Fixed numbering and the safe() constructor
  - Cyclic next / previous
  - Monday-first and symbol-table indices
  - Symbol lookup from injected and CLDR locale tables
  - Weekday of a point, is_today
  - Weekday / month name lists rotated to the first weekday
"""

from datetime import datetime

import pytest

from datekit.calendar import Calendar
from datekit.weekday import Symbols, Weekday, default_symbols, month_names, weekday_names


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def english():
    return Symbols(
        weekdays=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
        short_weekdays=("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
        very_short_weekdays=("S", "M", "T", "W", "T", "F", "S"),
        months=("January", "February", "March", "April", "May", "June", "July",
                "August", "September", "October", "November", "December"),
        short_months=("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul",
                      "Aug", "Sep", "Oct", "Nov", "Dec"),
    )


@pytest.fixture
def french():
    return Symbols(
        weekdays=("dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi"),
        short_weekdays=("dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."),
        very_short_weekdays=("D", "L", "M", "M", "J", "V", "S"),
        months=("janvier", "février", "mars", "avril", "mai", "juin", "juillet",
                "août", "septembre", "octobre", "novembre", "décembre"),
        short_months=("janv.", "févr.", "mars", "avr.", "mai", "juin", "juil.",
                      "août", "sept.", "oct.", "nov.", "déc."),
    )


# ── Numbering ─────────────────────────────────────────────────────────────────

class TestNumbering:

    def test_raw_values(self):
        assert Weekday.SUNDAY == 1
        assert Weekday.MONDAY == 2
        assert Weekday.SATURDAY == 7

    @pytest.mark.parametrize("raw", range(1, 8))
    def test_safe_valid(self, raw):
        assert Weekday.safe(raw).value == raw

    @pytest.mark.parametrize("raw", [0, 8, -3, 100])
    def test_safe_invalid_defaults_to_sunday(self, raw):
        assert Weekday.safe(raw) is Weekday.SUNDAY

    def test_safe_invalid_uses_fallback(self):
        assert Weekday.safe(0, fallback=Weekday.MONDAY) is Weekday.MONDAY


# ── Neighbours ────────────────────────────────────────────────────────────────

class TestNeighbours:

    def test_next(self):
        assert Weekday.safe(1).next == Weekday.safe(2)
        assert Weekday.FRIDAY.next is Weekday.SATURDAY

    def test_next_wraps(self):
        assert Weekday.SATURDAY.next is Weekday.SUNDAY

    def test_previous_wraps(self):
        assert Weekday.SUNDAY.previous is Weekday.SATURDAY
        assert Weekday.MONDAY.previous is Weekday.SUNDAY

    @pytest.mark.parametrize("day", list(Weekday))
    def test_next_previous_inverse(self, day):
        assert day.next.previous is day
        assert day.previous.next is day

    def test_seven_steps_cycle(self):
        day = Weekday.WEDNESDAY
        for _ in range(7):
            day = day.next
        assert day is Weekday.WEDNESDAY


# ── Indices ───────────────────────────────────────────────────────────────────

class TestIndices:

    def test_index_monday_first(self):
        assert Weekday.MONDAY.index_monday_first == 0
        assert Weekday.SATURDAY.index_monday_first == 5
        assert Weekday.SUNDAY.index_monday_first == 6

    def test_symbol_index(self):
        assert Weekday.SUNDAY.symbol_index == 0
        assert Weekday.SATURDAY.symbol_index == 6


# ── Symbols ───────────────────────────────────────────────────────────────────

class TestSymbols:

    def test_injected_symbols(self, french):
        assert Weekday.MONDAY.full_symbol(french) == "lundi"
        assert Weekday.MONDAY.short_symbol(french) == "lun."
        assert Weekday.MONDAY.very_short_symbol(french) == "L"
        assert Weekday.SUNDAY.full_symbol(french) == "dimanche"

    def test_locale_table_is_sunday_first(self):
        symbols = Symbols.from_locale("en_US")
        assert symbols.weekdays[:2] == ("Sunday", "Monday")
        assert symbols.short_weekdays[0] == "Sun"
        assert symbols.months[0] == "January"
        assert symbols.short_months[11] == "Dec"

    def test_very_short_names_come_from_locale_data(self):
        assert Symbols.from_locale("en_US").very_short_weekdays == (
            "S", "M", "T", "W", "T", "F", "S",
        )
        assert Symbols.from_locale("zh_CN").very_short_weekdays[:2] == ("日", "一")

    def test_locale_table_matches_injected(self, french):
        symbols = Symbols.from_locale("fr_FR")
        assert symbols.weekdays == french.weekdays
        assert symbols.months == french.months

    def test_default_symbols_resolved_once(self):
        assert default_symbols() is default_symbols()

    def test_default_lookup_uses_default_table(self):
        assert Weekday.MONDAY.full_symbol() == default_symbols().weekdays[1]
        assert Weekday.MONDAY.very_short_symbol() == default_symbols().very_short_weekdays[1]

    def test_wrong_table_size_raises(self, english):
        with pytest.raises(ValueError):
            Symbols(
                weekdays=english.weekdays[:6],
                short_weekdays=english.short_weekdays,
                very_short_weekdays=english.very_short_weekdays,
                months=english.months,
                short_months=english.short_months,
            )


# ── Calendar integration ──────────────────────────────────────────────────────

class TestCalendarIntegration:

    def test_weekday_of_point(self):
        cal = Calendar()
        assert Weekday.of(datetime(2024, 3, 20), calendar=cal) is Weekday.WEDNESDAY
        assert Weekday.of(datetime(2024, 3, 17), calendar=cal) is Weekday.SUNDAY

    def test_is_today(self):
        cal = Calendar()
        now = datetime(2024, 3, 20, 9)
        assert Weekday.WEDNESDAY.is_today(now, calendar=cal)
        assert not Weekday.THURSDAY.is_today(now, calendar=cal)

    def test_is_today_defaults_to_now(self):
        cal = Calendar()
        assert Weekday.of(cal.now(), calendar=cal).is_today(calendar=cal)

    def test_weekday_names_sunday_first(self, english):
        cal = Calendar(first_weekday=1, symbols=english)
        assert weekday_names(cal) == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

    def test_weekday_names_monday_first(self, english):
        cal = Calendar(first_weekday=2, symbols=english)
        assert weekday_names(cal) == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    def test_weekday_names_saturday_first(self, french):
        cal = Calendar(first_weekday=7, symbols=french)
        assert weekday_names(cal)[:2] == ["sam.", "dim."]

    def test_month_names(self, french):
        cal = Calendar(symbols=french)
        names = month_names(cal)
        assert len(names) == 12
        assert names[7] == "août"
