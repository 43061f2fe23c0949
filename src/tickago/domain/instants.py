"""Date input normalization.

Every public entry point funnels its inputs through :func:`parse_date`,
which resolves heterogeneous values into a canonical instant: a naive
``datetime`` carrying local wall-clock fields.

Accepted inputs:
- ``datetime``: naive values pass through unchanged, aware values are
  converted to local time and stripped of tzinfo.
- ``date``: midnight of that day.
- ``int`` / ``float``: epoch milliseconds.
- ``str``: a token pattern when *fmt* is given (``YYYY-MM-DD``,
  ``DD/MM/YYYY HH:mm``), otherwise python-dateutil's generic parser.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime, timedelta
from typing import Any

from dateutil import parser as dateutil_parser

from tickago.domain.errors import InvalidDateError

logger = logging.getLogger(__name__)

FORMAT_SEPARATORS = re.compile(r"[-/.\s:T]+")
DIGIT_GROUPS = re.compile(r"\d+")

_LOCAL_EPOCH = datetime.fromtimestamp(0)
_ONE_MS = timedelta(milliseconds=1)

# Token -> (datetime keyword, default when absent from the pattern)
FORMAT_TOKENS: dict[str, tuple[str, int | None]] = {
    "YYYY": ("year", None),
    "MM": ("month", 1),
    "DD": ("day", 1),
    "HH": ("hour", 0),
    "mm": ("minute", 0),
    "ss": ("second", 0),
}


def parse_date(value: Any, fmt: str | None = None) -> datetime:
    """Resolve *value* into a naive local ``datetime``.

    Args:
        value: A datetime, date, epoch-milliseconds number, or date string.
        fmt: Optional token pattern used for string inputs.

    Raises:
        InvalidDateError: If *value* cannot be resolved to a calendar instant.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value
        return _to_local(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    # bool is an int subclass; True is not an epoch.
    if isinstance(value, bool):
        msg = f"Invalid date: {value!r}"
        raise InvalidDateError(msg)

    if isinstance(value, (int, float)):
        return _from_epoch_ms(value)

    if isinstance(value, str):
        if fmt:
            return _parse_with_format(value, fmt)
        return _parse_generic(value)

    msg = f"Invalid date: unsupported type {type(value).__name__}"
    raise InvalidDateError(msg)


def to_epoch_ms(instant: datetime) -> float:
    """Return milliseconds since the epoch for a naive local instant.

    Honors ``fold``, so the two occurrences of a repeated wall time at a
    DST fall-back map to different epochs.
    """
    try:
        return instant.timestamp() * 1000
    except (OverflowError, OSError, ValueError):
        # Outside the platform's localtime range; no DST data applies there.
        return (instant - _LOCAL_EPOCH) / _ONE_MS


def _to_local(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time, keeping ``fold``."""
    local = value.astimezone().replace(tzinfo=None)
    if local.replace(microsecond=0).timestamp() != value.replace(microsecond=0).timestamp():
        local = local.replace(fold=1)
    return local


def _from_epoch_ms(value: float) -> datetime:
    if not math.isfinite(value):
        msg = f"Invalid date: non-finite epoch {value!r}"
        raise InvalidDateError(msg)
    try:
        return datetime.fromtimestamp(value / 1000)
    except (OverflowError, OSError, ValueError) as exc:
        msg = f"Invalid date: epoch {value!r} is out of range"
        raise InvalidDateError(msg) from exc


def _parse_generic(text: str) -> datetime:
    if not text.strip():
        msg = "Invalid date: empty string"
        raise InvalidDateError(msg)
    try:
        parsed = dateutil_parser.parse(text)
    except (ValueError, OverflowError) as exc:
        msg = f"Invalid date: {text!r}"
        raise InvalidDateError(msg) from exc
    if parsed.tzinfo is not None:
        parsed = _to_local(parsed)
    return parsed


def _parse_with_format(text: str, fmt: str) -> datetime:
    """Map the digit groups of *text* onto the tokens of *fmt* by position."""
    tokens = [t for t in FORMAT_SEPARATORS.split(fmt) if t]
    unknown = [t for t in tokens if t not in FORMAT_TOKENS]
    if unknown or "YYYY" not in tokens:
        msg = f"Invalid date format pattern: {fmt!r}"
        raise InvalidDateError(msg)

    parts = DIGIT_GROUPS.findall(text)
    if len(parts) < len(tokens):
        msg = f"Invalid date: {text!r} does not match {fmt!r}"
        raise InvalidDateError(msg)

    fields: dict[str, int] = {}
    for token, (name, default) in FORMAT_TOKENS.items():
        if token in tokens:
            fields[name] = int(parts[tokens.index(token)])
        elif default is not None:
            fields[name] = default

    logger.debug("Parsed %r with pattern %r: %s", text, fmt, fields)
    try:
        return datetime(**fields)
    except ValueError as exc:
        msg = f"Invalid date: {text!r} does not match {fmt!r}"
        raise InvalidDateError(msg) from exc
