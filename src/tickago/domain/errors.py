"""Exception types raised by the domain layer.

Two failure kinds, kept distinct so callers can tell bad input data
from bad formatting configuration.
"""

from __future__ import annotations


class TickagoError(Exception):
    """Base class for all tickago errors."""


class InvalidDateError(TickagoError, ValueError):
    """An input could not be resolved to a valid calendar instant."""


class InvalidConfigError(TickagoError, TypeError):
    """Formatter configuration (labels, templates, plural hook) is malformed."""
