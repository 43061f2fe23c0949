"""Shared pytest fixtures for tickago tests."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from tickago.config.settings import TickSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo handler/level changes made by configure_logging during a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    tick = logging.getLogger("tickago")
    tick_level = tick.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    tick.setLevel(tick_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on CLI test classes.
    """
    monkeypatch.delenv("TICKAGO_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> TickSettings:
    """Default settings with no config file discovered."""
    monkeypatch.delenv("TICKAGO_CONFIG", raising=False)
    return TickSettings.from_cli(start=tmp_path)


@pytest.fixture
def noon() -> datetime:
    """Fixed reference instant for relative-time tests."""
    return datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def new_york_tz(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Switch the process local time zone to America/New_York (observes DST)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    try:
        if time.tzname != ("EST", "EDT"):
            pytest.skip("America/New_York zone data is not installed")
        yield
    finally:
        monkeypatch.undo()
        time.tzset()
