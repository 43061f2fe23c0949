"""Subcommand modules for tickago.

Provides register_commands() which uses deferred imports to keep
``tickago --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tickago.commands.compare import compare
    from tickago.commands.moment import moment
    from tickago.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(compare)
    cli.add_command(moment)
