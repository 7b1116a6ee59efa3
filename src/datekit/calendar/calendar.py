import calendar as _stdlib_calendar
import logging
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Iterable, Optional

from babel import UnknownLocaleError
from dateutil import tz
from dateutil.relativedelta import relativedelta

from datekit._exceptions import CalendarError
from datekit.interval.interval import Interval
from datekit.units import CalendarUnit, DateComponents
from datekit.weekday.symbols import LocaleLike, Symbols, default_symbols, resolve_locale

logger = logging.getLogger(__name__)

Unit = CalendarUnit

# Units added on the wall clock (month-end clamping, DST-stable time of day).
_WALL_STEPS: dict[CalendarUnit, str] = {
    Unit.YEAR: "years",
    Unit.MONTH: "months",
    Unit.WEEK_OF_YEAR: "weeks",
    Unit.WEEK_OF_MONTH: "weeks",
    Unit.DAY: "days",
}

# Units added as elapsed time.
_ELAPSED_STEPS: dict[CalendarUnit, timedelta] = {
    Unit.HOUR: timedelta(hours=1),
    Unit.MINUTE: timedelta(minutes=1),
    Unit.SECOND: timedelta(seconds=1),
}

_DATETIME_FIELDS = frozenset(
    {Unit.YEAR, Unit.MONTH, Unit.DAY, Unit.HOUR, Unit.MINUTE, Unit.SECOND}
)


def raw_weekday(day: date) -> int:
    """Weekday number with Sunday=1 ... Saturday=7."""
    return (day.weekday() + 1) % 7 + 1


def _or(value: Optional[int], default: int) -> int:
    return default if value is None else value


class Calendar:
    """
    Lens through which points in time are split into civil components.

    Holds a time zone, the first day of the week (Sunday=1 ... Saturday=7)
    and the display symbols.  Naive datetimes are read as wall time in the
    calendar's zone; every datetime returned is aware, in that zone.
    """

    def __init__(
        self,
        zone: Optional[tzinfo] = None,
        first_weekday: int = 1,
        symbols: Optional[Symbols] = None,
    ) -> None:
        if not 1 <= first_weekday <= 7:
            raise CalendarError(
                f"First weekday must be in 1..7 (Sunday=1); got {first_weekday}."
            )
        self._zone: tzinfo = zone if zone is not None else tz.UTC
        self._first_weekday: int = int(first_weekday)
        self._symbols: Symbols = symbols if symbols is not None else default_symbols()

    # ── construction helpers ─────────────────────────────────────────────

    @classmethod
    def current(
        cls, locale: LocaleLike = None, symbols: Optional[Symbols] = None
    ) -> "Calendar":
        """
        Calendar in the host's local zone, with weeks starting on the first
        day of the week of `locale` (the host's LC_TIME locale by default).
        """
        try:
            loc = resolve_locale(locale)
        except (UnknownLocaleError, ValueError) as e:
            raise CalendarError(f"Unknown locale {locale!r}: {e}") from e
        # babel counts Monday=0 ... Sunday=6.
        first = (loc.first_week_day + 1) % 7 + 1
        zone = tz.tzlocal()
        logger.debug(f"Host calendar: zone={zone!r}, locale={loc}, first_weekday={first}")
        if symbols is None and locale is not None:
            symbols = Symbols.from_locale(loc)
        return cls(zone, first_weekday=first, symbols=symbols)

    @classmethod
    def named(
        cls,
        name: str,
        first_weekday: int = 1,
        symbols: Optional[Symbols] = None,
    ) -> "Calendar":
        zone = tz.gettz(name)
        if zone is None:
            raise CalendarError(f"Unknown time zone {name!r}.")
        return cls(zone, first_weekday=first_weekday, symbols=symbols)

    # ── wall clock ───────────────────────────────────────────────────────

    def localize(self, point: datetime) -> datetime:
        try:
            if point.tzinfo is None:
                return tz.resolve_imaginary(point.replace(tzinfo=self._zone))
            return point.astimezone(self._zone)
        except OverflowError as e:
            raise CalendarError(f"Cannot express {point} in {self._zone!r}: {e}") from e

    def now(self) -> datetime:
        return datetime.now(self._zone)

    def _wall(
        self,
        year: int,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> datetime:
        try:
            point = datetime(
                year, month, day, hour, minute, second, microsecond, tzinfo=self._zone
            )
            return tz.resolve_imaginary(point)
        except (OverflowError, ValueError) as e:
            raise CalendarError(
                f"Cannot build date {year:04d}-{month:02d}-{day:02d}: {e}"
            ) from e

    def _midnight(self, day: date) -> datetime:
        return self._wall(day.year, day.month, day.day)

    def _wall_add(self, point: datetime, delta: relativedelta) -> datetime:
        try:
            return tz.resolve_imaginary(point + delta)
        except (OverflowError, ValueError) as e:
            raise CalendarError(f"Cannot add {delta} to {point}: {e}") from e

    def _elapsed_add(self, point: datetime, delta: timedelta) -> datetime:
        try:
            return (point.astimezone(timezone.utc) + delta).astimezone(self._zone)
        except OverflowError as e:
            raise CalendarError(f"Cannot add {delta} to {point}: {e}") from e

    def _week_start(self, day: date) -> date:
        return day - timedelta(days=(raw_weekday(day) - self._first_weekday) % 7)

    # ── components ───────────────────────────────────────────────────────

    def components(
        self, point: datetime, units: Optional[Iterable[CalendarUnit]] = None
    ) -> DateComponents:
        p = self.localize(point)
        wanted = set(units) if units is not None else set(CalendarUnit)
        try:
            values = {unit: self._component(unit, p) for unit in wanted}
        except OverflowError as e:
            raise CalendarError(f"Cannot extract components of {point}: {e}") from e
        return DateComponents.from_mapping(values)

    def component(self, unit: CalendarUnit, point: datetime) -> int:
        return self.components(point, (unit,)).value(unit)

    def _component(self, unit: CalendarUnit, p: datetime) -> int:
        if unit in _DATETIME_FIELDS:
            return getattr(p, unit.value)
        if unit is Unit.NANOSECOND:
            return p.microsecond * 1000
        if unit is Unit.WEEKDAY:
            return raw_weekday(p.date())
        if unit is Unit.WEEK_OF_MONTH:
            return self._week_of_month(p.date())
        return self._week_of_year(p.date())

    def _week_of_month(self, day: date) -> int:
        lead = (raw_weekday(day.replace(day=1)) - self._first_weekday) % 7
        return (day.day - 1 + lead) // 7 + 1

    def _week_of_year(self, day: date) -> int:
        # Week 1 is the week holding January 1st.
        week_start = self._week_start(day)
        if (week_start + timedelta(days=6)).year > day.year:
            return 1
        first_week_start = self._week_start(date(day.year, 1, 1))
        return (week_start - first_week_start).days // 7 + 1

    def date_from(self, components: DateComponents) -> datetime:
        """Rebuild a point from components; missing date fields default to 1, time fields to 0."""
        c = components
        return self._wall(
            _or(c.year, 1),
            _or(c.month, 1),
            _or(c.day, 1),
            _or(c.hour, 0),
            _or(c.minute, 0),
            _or(c.second, 0),
            _or(c.nanosecond, 0) // 1000,
        )

    # ── intervals and ranges ─────────────────────────────────────────────

    def interval_of(self, unit: CalendarUnit, point: datetime) -> Interval:
        """The calendar unit holding `point`, as [start, start of the next unit)."""
        p = self.localize(point)
        try:
            if unit is Unit.YEAR:
                start = self._wall(p.year)
                end = self._wall_add(start, relativedelta(years=1))
            elif unit is Unit.MONTH:
                start = self._wall(p.year, p.month)
                end = self._wall_add(start, relativedelta(months=1))
            elif unit in (Unit.WEEK_OF_YEAR, Unit.WEEK_OF_MONTH):
                first = self._week_start(p.date())
                start = self._midnight(first)
                end = self._midnight(first + timedelta(days=7))
            elif unit in (Unit.DAY, Unit.WEEKDAY):
                start = self._midnight(p.date())
                end = self._midnight(p.date() + timedelta(days=1))
            elif unit is Unit.HOUR:
                start = p.replace(minute=0, second=0, microsecond=0)
                end = self._elapsed_add(start, _ELAPSED_STEPS[unit])
            elif unit is Unit.MINUTE:
                start = p.replace(second=0, microsecond=0)
                end = self._elapsed_add(start, _ELAPSED_STEPS[unit])
            elif unit is Unit.SECOND:
                start = p.replace(microsecond=0)
                end = self._elapsed_add(start, _ELAPSED_STEPS[unit])
            else:
                raise CalendarError(f"No calendar interval for {unit.value}.")
        except OverflowError as e:
            raise CalendarError(f"Cannot compute {unit.value} of {point}: {e}") from e
        return Interval(start, end)

    def start_of_day(self, point: datetime) -> datetime:
        return self.interval_of(Unit.DAY, point).start

    def range_of(
        self, unit: CalendarUnit, larger: CalendarUnit, point: datetime
    ) -> range:
        """Values `unit` takes within the `larger` unit holding `point`."""
        day = self.localize(point).date()
        days_in_month = _stdlib_calendar.monthrange(day.year, day.month)[1]
        key = (unit, larger)
        if key == (Unit.DAY, Unit.MONTH):
            return range(1, days_in_month + 1)
        if key == (Unit.DAY, Unit.YEAR):
            return range(1, (366 if _stdlib_calendar.isleap(day.year) else 365) + 1)
        if key == (Unit.MONTH, Unit.YEAR):
            return range(1, 13)
        if key == (Unit.HOUR, Unit.DAY):
            return range(0, 24)
        if key == (Unit.WEEK_OF_MONTH, Unit.MONTH):
            last = day.replace(day=days_in_month)
            return range(1, self._week_of_month(last) + 1)
        if key == (Unit.DAY, Unit.WEEK_OF_MONTH):
            # Days of the week holding `point`, clipped to its month.
            week_start = self._week_start(day)
            first = max(week_start, day.replace(day=1))
            try:
                last = min(week_start + timedelta(days=6), day.replace(day=days_in_month))
            except OverflowError:
                last = day.replace(day=days_in_month)
            return range(first.day, last.day + 1)
        raise CalendarError(f"No range of {unit.value} in {larger.value}.")

    # ── arithmetic ───────────────────────────────────────────────────────

    def add(self, unit: CalendarUnit, value: int, point: datetime) -> datetime:
        p = self.localize(point)
        if unit in _WALL_STEPS:
            return self._wall_add(p, relativedelta(**{_WALL_STEPS[unit]: int(value)}))
        try:
            if unit is Unit.NANOSECOND:
                delta = timedelta(microseconds=value / 1000)
            elif unit in _ELAPSED_STEPS:
                delta = _ELAPSED_STEPS[unit] * value
            else:
                raise CalendarError(f"Cannot add {unit.value} units.")
        except OverflowError as e:
            raise CalendarError(f"Cannot add {value} {unit.value} units: {e}") from e
        return self._elapsed_add(p, delta)

    def is_same(
        self, first: datetime, second: datetime, granularity: CalendarUnit = Unit.DAY
    ) -> bool:
        if granularity is Unit.NANOSECOND:
            return self.localize(first) == self.localize(second)
        return (
            self.interval_of(granularity, first).start
            == self.interval_of(granularity, second).start
        )

    def difference(
        self, start: datetime, end: datetime, units: Iterable[CalendarUnit]
    ) -> DateComponents:
        """
        Breakdown of end - start into the requested units, largest first.

        Years, months, weeks and days are counted on the wall clock; hours
        and smaller count elapsed time.  Units not requested are folded into
        the next smaller requested one.
        """
        wanted = set(units)
        a = self.localize(start)
        b = self.localize(end)
        if b < a:
            return self.difference(b, a, wanted).negated()

        values: dict[CalendarUnit, int] = {}
        cursor = a

        if Unit.YEAR in wanted or Unit.MONTH in wanted:
            delta = relativedelta(b.replace(tzinfo=None), a.replace(tzinfo=None))
            total = delta.years * 12 + delta.months
            years = total // 12 if Unit.YEAR in wanted else 0
            months = total - years * 12 if Unit.MONTH in wanted else 0
            if Unit.YEAR in wanted:
                values[Unit.YEAR] = years
            if Unit.MONTH in wanted:
                values[Unit.MONTH] = months
            cursor = self._wall_add(a, relativedelta(months=years * 12 + months))

        week_unit = next(
            (u for u in (Unit.WEEK_OF_MONTH, Unit.WEEK_OF_YEAR) if u in wanted), None
        )
        if week_unit is not None or Unit.DAY in wanted:
            days = (b.date() - cursor.date()).days
            if cursor.replace(tzinfo=None) + timedelta(days=days) > b.replace(tzinfo=None):
                days -= 1
            weeks = days // 7 if week_unit is not None else 0
            if week_unit is not None:
                values[week_unit] = weeks
            if Unit.DAY in wanted:
                values[Unit.DAY] = days - weeks * 7
            consumed = days if Unit.DAY in wanted else weeks * 7
            cursor = self._wall_add(cursor, relativedelta(days=consumed))

        sub_day = [u for u in (Unit.HOUR, Unit.MINUTE, Unit.SECOND) if u in wanted]
        if sub_day or Unit.NANOSECOND in wanted:
            remaining = max(
                b.astimezone(timezone.utc) - cursor.astimezone(timezone.utc),
                timedelta(0),
            )
            for unit in sub_day:
                values[unit], remaining = divmod(remaining, _ELAPSED_STEPS[unit])
            if Unit.NANOSECOND in wanted:
                values[Unit.NANOSECOND] = remaining // timedelta(microseconds=1) * 1000

        return DateComponents.from_mapping(values)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def zone(self) -> tzinfo:
        return self._zone

    @property
    def first_weekday(self) -> int:
        return self._first_weekday

    @property
    def symbols(self) -> Symbols:
        return self._symbols

    def __repr__(self) -> str:
        return (
            f"Calendar(zone={self._zone!r}, "
            f"first_weekday={self._first_weekday})"
        )
