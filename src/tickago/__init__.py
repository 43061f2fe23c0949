"""tickago: calendar-aware date differences and relative-time strings."""

from __future__ import annotations

from tickago.domain.calendar import compare, days_in_month, is_leap_year
from tickago.domain.errors import InvalidConfigError, InvalidDateError, TickagoError
from tickago.domain.instants import parse_date
from tickago.domain.labels import DEFAULT_LABELS
from tickago.domain.models import CalendarDiff, RawDiff
from tickago.domain.relative import format_relative, moment, select_unit

__version__ = "0.3.0"

__all__ = [
    "DEFAULT_LABELS",
    "CalendarDiff",
    "InvalidConfigError",
    "InvalidDateError",
    "RawDiff",
    "TickagoError",
    "__version__",
    "compare",
    "days_in_month",
    "format_relative",
    "is_leap_year",
    "moment",
    "parse_date",
    "select_unit",
]
