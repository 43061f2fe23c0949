"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tickago.domain.models import UNIT_FIELDS
from tickago.output.console import create_console, get_output, style_for_direction

if TYPE_CHECKING:
    from rich.console import Console

    from tickago.services.result import ServiceResult

_SHORT_UNITS: dict[str, str] = {
    "years": "y",
    "months": "mo",
    "days": "d",
    "hours": "h",
    "minutes": "m",
    "seconds": "s",
}


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the essential value for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    data = result.data
    if result.op == "moment":
        return str(data["text"])
    if result.op == "parse":
        return str(data["iso"])
    if result.op == "compare":
        return compact_breakdown(data)
    return f"OK: {result.op}"


def compact_breakdown(data: dict[str, Any]) -> str:
    """Short ``1y 2mo 3d`` form of a diff payload; ``0s`` when empty.

    Examples:
        >>> compact_breakdown({"years": 1, "months": 0, "days": 3})
        '1y 3d'
    """
    parts = [
        f"{data[field]}{_SHORT_UNITS[field]}" for field, _unit in UNIT_FIELDS if data.get(field)
    ]
    return " ".join(parts) or "0s"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="tick.ok"), Text(f"  {result.op}", style="tick.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="tick.key"), Text(str(value)), sep="")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_parse(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "iso", data["iso"])
    _field(console, "epoch_ms", f"{data['epoch_ms']:.0f}")
    if verbose:
        _field(console, "input", data["input"])


def _render_compare(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    raw: dict[str, float] = data.get("raw", {})
    is_future = bool(data.get("is_future"))

    _status_line(console, result)

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("unit")
    table.add_column("calendar", justify="right", style="tick.value")
    table.add_column("total", justify="right")
    for field, _unit in UNIT_FIELDS:
        total = raw.get(field)
        table.add_row(field, str(data[field]), "" if total is None else f"{total:,.2f}")
    if verbose:
        table.add_row("milliseconds", "", f"{raw.get('milliseconds', 0.0):,.0f}")
    console.print(table)

    direction = "future" if is_future else "past"
    console.print(
        Text("  direction: ", style="tick.key"),
        Text(direction, style=style_for_direction(is_future)),
        sep="",
    )


def _render_moment(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    console.print(Text(str(data["text"]), style=style_for_direction(bool(data["is_future"]))))
    if verbose:
        _field(console, "timestamp", data["timestamp"])
        _field(console, "now", data["now"])
        _field(console, "unit", data["unit"])
        _field(console, "value", data["value"])


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    message = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="tick.error"),
        Text(f"  {result.op}", style="tick.op"),
        Text(f"  {message}"),
    )
    if verbose and result.error:
        _field(console, "code", result.error.code)
        for key, value in result.error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "parse": _render_parse,
    "compare": _render_compare,
    "moment": _render_moment,
}
