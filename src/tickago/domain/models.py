"""Value objects produced by the calendar diff engine.

All models use Pydantic with frozen config for immutability.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Field scan order for unit selection, coarsest first: (field, unit name).
UNIT_FIELDS: tuple[tuple[str, str], ...] = (
    ("years", "year"),
    ("months", "month"),
    ("days", "day"),
    ("hours", "hour"),
    ("minutes", "minute"),
    ("seconds", "second"),
)


class RawDiff(BaseModel):
    """Total elapsed duration expressed as a continuous quantity per unit."""

    model_config = {"frozen": True}

    milliseconds: float = 0.0
    seconds: float = 0.0
    minutes: float = 0.0
    hours: float = 0.0
    days: float = 0.0
    months: float = 0.0
    years: float = 0.0


class CalendarDiff(BaseModel):
    """Field-wise calendar breakdown between two instants.

    Fields always describe a non-negative duration between the earlier
    and later instant; direction is carried only by ``is_future``.
    """

    model_config = {"frozen": True}

    years: int = Field(default=0, ge=0)
    months: int = Field(default=0, ge=0, lt=12)
    days: int = Field(default=0, ge=0)
    hours: int = Field(default=0, ge=0, lt=24)
    minutes: int = Field(default=0, ge=0, lt=60)
    seconds: int = Field(default=0, ge=0, lt=60)
    raw: RawDiff = Field(default_factory=RawDiff)
    is_future: bool = False

    def as_dict(self) -> dict[str, Any]:
        """Plain-dict view for JSON payloads."""
        return self.model_dump()
