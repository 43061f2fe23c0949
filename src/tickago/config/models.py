"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tickago.toml only contains
overrides. An empty file (or no file) yields the library defaults.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class LabelsConfig(BaseModel):
    """[labels] section.

    Unset templates are omitted from :meth:`to_mapping` so the formatter
    falls back to its own defaults. ``plural`` has no TOML form; the
    default English suffix rule always applies from config.
    """

    model_config = {"frozen": True}

    past: str | None = None
    future: str | None = None
    now: str | None = None
    units: dict[str, str] = Field(default_factory=dict)

    def to_mapping(self) -> dict[str, Any]:
        """Return the label mapping accepted by ``format_relative``."""
        return self.model_dump(exclude_none=True, exclude_defaults=True)


class ParseConfig(BaseModel):
    """[parse] section."""

    model_config = {"frozen": True}

    format: str | None = None
