"""Label configuration for the relative-time formatter.

A label config is a plain mapping with the recognized keys ``past``,
``future``, ``now``, ``units`` and ``plural``. Unknown keys are ignored.
Supplied values merge over :data:`DEFAULT_LABELS`: ``units`` merges per
key, everything else replaces wholesale.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from tickago.domain.errors import InvalidConfigError

PLACEHOLDERS: tuple[str, ...] = ("{value}", "{unit}", "{plural}")

PluralFn = Callable[[int, str], str]


def default_plural(value: int, unit: str) -> str:
    """English suffix rule: no suffix for exactly one, ``s`` otherwise."""
    return "" if value == 1 else "s"


DEFAULT_LABELS: Mapping[str, Any] = MappingProxyType(
    {
        "past": "{value} {unit}{plural} ago",
        "future": "in {value} {unit}{plural}",
        "now": "just now",
        "units": MappingProxyType(
            {
                "year": "year",
                "month": "month",
                "day": "day",
                "hour": "hour",
                "minute": "minute",
                "second": "second",
            }
        ),
        "plural": default_plural,
    }
)


@dataclass(frozen=True)
class ResolvedLabels:
    """Validated label set with defaults applied."""

    past: str
    future: str
    now: str
    units: Mapping[str, str]
    plural: PluralFn


def has_placeholders(template: str) -> bool:
    """True when *template* contains every one of ``{value}``, ``{unit}``, ``{plural}``."""
    return all(p in template for p in PLACEHOLDERS)


def resolve_labels(labels: Mapping[str, Any] | None = None) -> ResolvedLabels:
    """Validate *labels* and merge them over the defaults.

    Raises:
        InvalidConfigError: If *labels* is not a mapping, ``plural`` is not
            callable, a template or ``now`` is not a string, or ``units``
            is not a mapping.
    """
    if labels is None:
        labels = {}
    if not isinstance(labels, Mapping):
        msg = f"Labels must be a mapping, got {type(labels).__name__}"
        raise InvalidConfigError(msg)

    for key in ("past", "future", "now"):
        if key in labels and not isinstance(labels[key], str):
            msg = f"Label {key!r} must be a string, got {type(labels[key]).__name__}"
            raise InvalidConfigError(msg)

    plural = labels.get("plural", DEFAULT_LABELS["plural"])
    if not callable(plural):
        msg = f"Label 'plural' must be callable, got {type(plural).__name__}"
        raise InvalidConfigError(msg)

    custom_units = labels.get("units", {})
    if not isinstance(custom_units, Mapping):
        msg = f"Label 'units' must be a mapping, got {type(custom_units).__name__}"
        raise InvalidConfigError(msg)

    return ResolvedLabels(
        past=labels.get("past", DEFAULT_LABELS["past"]),
        future=labels.get("future", DEFAULT_LABELS["future"]),
        now=labels.get("now", DEFAULT_LABELS["now"]),
        units={**DEFAULT_LABELS["units"], **custom_units},
        plural=plural,
    )
