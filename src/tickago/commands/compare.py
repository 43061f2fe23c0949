"""Command: calendar breakdown between two dates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tickago.commands._base import TickCommand

if TYPE_CHECKING:
    from tickago.commands._context import AppContext


@click.command(
    cls=TickCommand,
    examples="""\
  tickago compare 2024-01-31 2024-03-01
  tickago compare 2023-03-01 2024-03-01 --json
  tickago compare 01.02.2024 15.03.2024 --format DD.MM.YYYY
  tickago -q compare 2020-02-29 2024-02-28""",
)
@click.argument("date1")
@click.argument("date2")
@click.option("--format", "fmt", default=None, help="Token pattern for both dates.")
@click.pass_obj
def compare(app: AppContext, date1: str, date2: str, fmt: str | None) -> None:
    """Show the years/months/days/... between DATE1 and DATE2."""
    app.emit(app.service.compare(date1, date2, fmt=fmt))
