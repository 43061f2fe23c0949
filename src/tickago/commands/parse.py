"""Command: resolve a date input to its canonical instant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tickago.commands._base import TickCommand

if TYPE_CHECKING:
    from tickago.commands._context import AppContext


@click.command(
    cls=TickCommand,
    examples="""\
  tickago parse 2024-01-31
  tickago parse "31/01/2024 14:30" --format "DD/MM/YYYY HH:mm"
  tickago parse 1706659200000
  tickago --json parse 2024-01-31T10:00:00Z""",
)
@click.argument("value")
@click.option("--format", "fmt", default=None, help="Token pattern, e.g. YYYY-MM-DD.")
@click.pass_obj
def parse(app: AppContext, value: str, fmt: str | None) -> None:
    """Parse VALUE (date string or epoch milliseconds) into an ISO instant."""
    app.emit(app.service.parse(value, fmt=fmt))
