"""DiffService: parse, compare, and relative-time operations for the CLI."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from tickago.domain.calendar import compare
from tickago.domain.errors import TickagoError
from tickago.domain.instants import parse_date, to_epoch_ms
from tickago.domain.labels import has_placeholders
from tickago.domain.relative import format_relative, select_unit
from tickago.services.base import BaseService
from tickago.services.result import ServiceResult

NUMERIC_INPUT = re.compile(r"^-?\d+(\.\d+)?$")


def coerce_cli_value(value: str, fmt: str | None = None) -> str | int | float:
    """Treat numeric-looking command-line values as epoch milliseconds.

    Values are left as text whenever a format pattern applies, so
    ``2024`` under ``YYYY`` stays a year.

    Examples:
        >>> coerce_cli_value("1700000000000")
        1700000000000
        >>> coerce_cli_value("2024-01-31")
        '2024-01-31'
        >>> coerce_cli_value("2024", "YYYY")
        '2024'
    """
    text = value.strip()
    if fmt or not NUMERIC_INPUT.match(text):
        return value
    return float(text) if "." in text else int(text)


class DiffService(BaseService):
    """Wraps the domain functions and resolves defaults from settings."""

    def _format(self, fmt: str | None) -> str | None:
        return fmt if fmt is not None else self._settings.parse.format

    def parse(self, value: str, *, fmt: str | None = None) -> ServiceResult:
        """Resolve *value* to a canonical instant."""
        fmt = self._format(fmt)
        try:
            instant = parse_date(coerce_cli_value(value, fmt), fmt)
        except TickagoError as exc:
            return self._failure("parse", exc, input=value)

        return ServiceResult(
            ok=True,
            op="parse",
            data={
                "input": value,
                "iso": instant.isoformat(),
                "epoch_ms": to_epoch_ms(instant),
            },
        )

    def compare(self, date1: str, date2: str, *, fmt: str | None = None) -> ServiceResult:
        """Calendar breakdown between two inputs."""
        fmt = self._format(fmt)
        try:
            diff = compare(coerce_cli_value(date1, fmt), coerce_cli_value(date2, fmt), fmt)
        except TickagoError as exc:
            return self._failure("compare", exc, date1=date1, date2=date2)

        return ServiceResult(ok=True, op="compare", data=diff.as_dict())

    def moment(
        self,
        timestamp: str,
        *,
        now: str | None = None,
        fmt: str | None = None,
        label_overrides: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Relative-time string for *timestamp* using configured labels.

        *label_overrides* replace the ``[labels]`` values from settings
        key by key (``units`` merges). A configured template that lacks
        a placeholder is reported as a warning and the default is used.
        """
        labels = self._labels(label_overrides or {})
        fmt = self._format(fmt)
        try:
            if now is None:
                reference = datetime.now()
            else:
                reference = parse_date(coerce_cli_value(now, fmt), fmt)
            target = parse_date(coerce_cli_value(timestamp, fmt), fmt)
            diff = compare(reference, target)
            text = format_relative(diff, labels)
        except TickagoError as exc:
            return self._failure("moment", exc, timestamp=timestamp)

        selected = select_unit(diff)
        warnings: list[str] = []
        key = "future" if diff.is_future else "past"
        if selected and key in labels and not has_placeholders(labels[key]):
            template = labels[key]
            warnings.append(f"{key} template {template!r} is missing placeholders; used default")

        return ServiceResult(
            ok=True,
            op="moment",
            data={
                "text": text,
                "timestamp": target.isoformat(),
                "now": reference.isoformat(),
                "unit": selected[0] if selected else None,
                "value": selected[1] if selected else 0,
                "is_future": diff.is_future,
            },
            warnings=warnings,
        )

    def _labels(self, overrides: dict[str, Any]) -> dict[str, Any]:
        labels = self._settings.labels.to_mapping()
        units = {**labels.get("units", {}), **overrides.get("units", {})}
        labels.update({k: v for k, v in overrides.items() if k != "units"})
        if units:
            labels["units"] = units
        return labels
