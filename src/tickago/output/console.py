"""Rich Console factory and theme for tickago output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TICK_THEME = Theme(
    {
        "tick.ok": "bold green",
        "tick.error": "bold red",
        "tick.op": "bold cyan",
        "tick.key": "dim",
        "tick.text": "bold",
        "tick.past": "yellow",
        "tick.future": "blue",
        "tick.value": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TICK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_direction(is_future: bool) -> str:
    """Return the Rich style name for a past/future result."""
    return "tick.future" if is_future else "tick.past"
