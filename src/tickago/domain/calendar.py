"""Calendar-correct differences between two instants.

The breakdown is produced by field-wise subtraction with borrowing, not
by dividing an elapsed duration by fixed month/year lengths:

1. Subtract each calendar field of the earlier instant from the later one.
2. Borrow upward: seconds from minutes (+60), minutes from hours (+60),
   hours from days (+24).
3. Negative days borrow one month and gain the length of the *start*
   instant's month.
4. Negative months borrow one year and gain 12.

INVARIANT: the result never depends on argument order except for
``is_future``.
"""

from __future__ import annotations

import functools
import logging
from datetime import datetime
from typing import Any

from tickago.domain.instants import parse_date, to_epoch_ms
from tickago.domain.models import CalendarDiff, RawDiff

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
DAYS_PER_YEAR = 365.25
MS_PER_MONTH = MS_PER_DAY * DAYS_PER_YEAR / 12
MS_PER_YEAR = MS_PER_DAY * DAYS_PER_YEAR

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


@functools.lru_cache(maxsize=1024)
def days_in_month(year: int, month: int) -> int:
    """Number of days in *month* (1-12) of *year*.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 2)
        28
        >>> days_in_month(2024, 1)
        31
    """
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def compare(date1: Any, date2: Any, fmt: str | None = None) -> CalendarDiff:
    """Compute the calendar breakdown between *date1* and *date2*.

    Both arguments are parsed with :func:`parse_date` first.
    ``is_future`` is True when *date2* is chronologically after *date1*.

    Raises:
        InvalidDateError: If either argument cannot be parsed.
    """
    a = parse_date(date1, fmt)
    b = parse_date(date2, fmt)
    a_ms, b_ms = to_epoch_ms(a), to_epoch_ms(b)

    # Calendar fields follow wall-clock order; elapsed time and direction
    # follow the epoch, which differs from it across a DST fall-back.
    start, end = (a, b) if a <= b else (b, a)
    years, months, days, hours, minutes, seconds = _field_breakdown(start, end)
    diff = CalendarDiff(
        years=years,
        months=months,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        raw=_raw_from_ms(abs(b_ms - a_ms)),
        is_future=b_ms > a_ms,
    )
    logger.debug("compare %s -> %s: %s", a.isoformat(), b.isoformat(), diff)
    return diff


def _raw_from_ms(ms: float) -> RawDiff:
    """Continuous elapsed-duration figures for *ms* milliseconds."""
    return RawDiff(
        milliseconds=ms,
        seconds=ms / MS_PER_SECOND,
        minutes=ms / MS_PER_MINUTE,
        hours=ms / MS_PER_HOUR,
        days=ms / MS_PER_DAY,
        months=ms / MS_PER_MONTH,
        years=ms / MS_PER_YEAR,
    )


def _field_breakdown(start: datetime, end: datetime) -> tuple[int, int, int, int, int, int]:
    """Field-wise subtraction with borrowing; requires ``start <= end``."""
    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day
    hours = end.hour - start.hour
    minutes = end.minute - start.minute
    seconds = end.second - start.second

    if seconds < 0:
        seconds += 60
        minutes -= 1
    if minutes < 0:
        minutes += 60
        hours -= 1
    if hours < 0:
        hours += 24
        days -= 1

    if months < 0:
        months += 12
        years -= 1

    if days < 0:
        days += days_in_month(start.year, start.month)
        months -= 1

    # The day borrow may push months negative again.
    if months < 0:
        months += 12
        years -= 1

    return years, months, days, hours, minutes, seconds
