"""Command: relative-time string for a timestamp."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from tickago.commands._base import TickCommand

if TYPE_CHECKING:
    from tickago.commands._context import AppContext


@click.command(
    cls=TickCommand,
    examples="""\
  tickago moment 2024-01-31
  tickago moment 2024-01-31 --now 2024-03-01
  tickago moment 2030-01-01 --future "{value} {unit}{plural} from now"
  tickago moment "$(date -d '-3 min' +%s)000"
  tickago --json moment 2024-01-31 --now 2024-01-31""",
)
@click.argument("timestamp")
@click.option("--now", "now", default=None, help="Reference instant (default: current time).")
@click.option("--format", "fmt", default=None, help="Token pattern for TIMESTAMP and --now.")
@click.option("--past", default=None, help="Past template with {value}, {unit}, {plural}.")
@click.option("--future", default=None, help="Future template with {value}, {unit}, {plural}.")
@click.option("--now-label", default=None, help="Text shown when the difference is negligible.")
@click.pass_obj
def moment(
    app: AppContext,
    timestamp: str,
    now: str | None,
    fmt: str | None,
    past: str | None,
    future: str | None,
    now_label: str | None,
) -> None:
    """Describe TIMESTAMP relative to now, e.g. "3 months ago" or "in 2 days"."""
    overrides: dict[str, Any] = {}
    if past is not None:
        overrides["past"] = past
    if future is not None:
        overrides["future"] = future
    if now_label is not None:
        overrides["now"] = now_label
    app.emit(app.service.moment(timestamp, now=now, fmt=fmt, label_overrides=overrides))
