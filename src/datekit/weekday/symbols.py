from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Union

from babel import Locale, default_locale

LocaleLike = Union[Locale, str, None]


def resolve_locale(locale: LocaleLike = None) -> Locale:
    """`locale` as a babel Locale; the host's LC_TIME locale when None."""
    if isinstance(locale, Locale):
        return locale
    return Locale.parse(locale or default_locale("LC_TIME") or "en_US_POSIX")


def _sunday_first(monday_first: Mapping[int, str]) -> tuple[str, ...]:
    # babel keys weekdays Monday=0 ... Sunday=6.
    return tuple(monday_first[i] for i in (6, 0, 1, 2, 3, 4, 5))


@dataclass(frozen=True, slots=True)
class Symbols:
    """
    Display names for weekdays and months.

    Weekday tables are Sunday-first (index = Weekday value - 1) whatever the
    calendar's first weekday; month tables are January-first.
    """

    weekdays: tuple[str, ...]
    short_weekdays: tuple[str, ...]
    very_short_weekdays: tuple[str, ...]
    months: tuple[str, ...]
    short_months: tuple[str, ...]

    def __post_init__(self) -> None:
        for name in ("weekdays", "short_weekdays", "very_short_weekdays"):
            if len(getattr(self, name)) != 7:
                raise ValueError(f"{name} must hold 7 names; got {len(getattr(self, name))}.")
        for name in ("months", "short_months"):
            if len(getattr(self, name)) != 12:
                raise ValueError(f"{name} must hold 12 names; got {len(getattr(self, name))}.")

    @classmethod
    def from_locale(cls, locale: LocaleLike = None) -> Symbols:
        """Stand-alone names from the CLDR data of `locale` (the host's LC_TIME by default)."""
        loc = resolve_locale(locale)
        days = loc.days["stand-alone"]
        months = loc.months["stand-alone"]
        return cls(
            weekdays=_sunday_first(days["wide"]),
            short_weekdays=_sunday_first(days["abbreviated"]),
            very_short_weekdays=_sunday_first(days["narrow"]),
            months=tuple(months["wide"][m] for m in range(1, 13)),
            short_months=tuple(months["abbreviated"][m] for m in range(1, 13)),
        )


@lru_cache(maxsize=None)
def default_symbols() -> Symbols:
    return Symbols.from_locale()
