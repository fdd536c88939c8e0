"""Calendar facts used by the reports."""

from __future__ import annotations

import datetime

_THIRTY_ONE = frozenset({1, 3, 5, 7, 8, 10, 12})
_THIRTY = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a Gregorian leap year."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_per_month(year: int, month: int) -> int:
    """Return the number of days of ``month`` (1 = January) in ``year``."""
    if month in _THIRTY_ONE:
        return 31
    if month in _THIRTY:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    raise ValueError(f"invalid month: {month}")


def days_in_month_of(date: datetime.date) -> int:
    """Return the number of days of the month that ``date`` lies in."""
    return days_per_month(date.year, date.month)


def day_abbreviation(wday: int) -> str:
    """Return the current locale's abbreviation of a weekday (1 = Monday ... 7 = Sunday)."""
    # November 2010 starts on a Monday.
    return datetime.date(2010, 11, wday).strftime("%a")


def month_name(month: int) -> str:
    """Return the current locale's name of ``month`` (1 = January)."""
    return datetime.date(2010, month, 1).strftime("%B")