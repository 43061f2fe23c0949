"""Relative-time rendering ("3 months ago", "in 2 days", "just now").

The coarsest non-zero field of a :class:`CalendarDiff` is rendered through
a direction template. Seconds only count when greater than one, so a
sub-two-second difference reads as the ``now`` label.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from tickago.domain.calendar import compare
from tickago.domain.instants import parse_date
from tickago.domain.labels import DEFAULT_LABELS, has_placeholders, resolve_labels
from tickago.domain.models import UNIT_FIELDS, CalendarDiff

logger = logging.getLogger(__name__)

SECONDS_THRESHOLD = 1


def select_unit(diff: CalendarDiff) -> tuple[str, int] | None:
    """Return ``(unit, value)`` for the coarsest qualifying field, or None.

    Examples:
        >>> select_unit(CalendarDiff(days=3, hours=4))
        ('day', 3)
        >>> select_unit(CalendarDiff(seconds=1)) is None
        True
    """
    for field, unit in UNIT_FIELDS:
        value: int = getattr(diff, field)
        threshold = SECONDS_THRESHOLD if unit == "second" else 0
        if value > threshold:
            return unit, value
    return None


def format_relative(diff: CalendarDiff, labels: Mapping[str, Any] | None = None) -> str:
    """Render *diff* as a relative-time string.

    Raises:
        InvalidConfigError: If *labels* is malformed.
    """
    resolved = resolve_labels(labels)

    selected = select_unit(diff)
    if selected is None:
        return resolved.now
    unit, value = selected

    plural = resolved.plural(value, unit)
    unit_label = resolved.units.get(unit)
    if unit_label is None:
        unit_label = unit

    key = "future" if diff.is_future else "past"
    template = resolved.future if diff.is_future else resolved.past
    if not has_placeholders(template):
        logger.debug("%s template %r is missing placeholders, using default", key, template)
        template = DEFAULT_LABELS[key]

    return (
        template.replace("{value}", str(value), 1)
        .replace("{unit}", str(unit_label), 1)
        .replace("{plural}", str(plural), 1)
    )


def moment(
    timestamp: Any,
    labels: Mapping[str, Any] | None = None,
    *,
    now: Any = None,
    fmt: str | None = None,
) -> str:
    """Describe *timestamp* relative to *now* (default: the current local time).

    Raises:
        InvalidDateError: If *timestamp* or *now* cannot be parsed.
        InvalidConfigError: If *labels* is malformed.
    """
    reference = datetime.now() if now is None else parse_date(now, fmt)
    target = parse_date(timestamp, fmt)
    return format_relative(compare(reference, target), labels)
