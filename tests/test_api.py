"""Tests for the package-level public API."""

from datetime import datetime

import pytest

import tickago


def test_public_names() -> None:
    for name in tickago.__all__:
        assert hasattr(tickago, name)


def test_moment_round_trip() -> None:
    now = datetime(2024, 3, 1)
    assert tickago.moment("2024-01-31", now=now) == "1 month ago"


def test_compare_returns_diff() -> None:
    diff = tickago.compare("2024-01-31", "2024-03-01")
    assert isinstance(diff, tickago.CalendarDiff)
    assert (diff.months, diff.days) == (1, 1)


def test_errors_exported() -> None:
    with pytest.raises(tickago.InvalidDateError):
        tickago.parse_date("nonsense")
    with pytest.raises(tickago.InvalidConfigError):
        tickago.format_relative(tickago.CalendarDiff(days=1), {"plural": 0})
    assert issubclass(tickago.InvalidDateError, tickago.TickagoError)
    assert issubclass(tickago.InvalidConfigError, tickago.TickagoError)
