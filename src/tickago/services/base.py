"""BaseService: shared foundation for tickago services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tickago.domain.errors import InvalidConfigError, InvalidDateError, TickagoError
from tickago.services.result import INVALID_CONFIG, INVALID_DATE, ServiceError, ServiceResult

if TYPE_CHECKING:
    from tickago.config.settings import TickSettings

logger = logging.getLogger(__name__)

_ERROR_CODES: dict[type[TickagoError], str] = {
    InvalidDateError: INVALID_DATE,
    InvalidConfigError: INVALID_CONFIG,
}


class BaseService:
    """Base for service classes.

    Every service receives the resolved :class:`TickSettings` at
    construction time and reads its defaults (labels, parse format)
    from there.
    """

    def __init__(self, settings: TickSettings) -> None:
        self._settings = settings

    @staticmethod
    def _failure(op: str, exc: TickagoError, **detail: object) -> ServiceResult:
        """Convert a domain exception into a failed ServiceResult."""
        code = _ERROR_CODES.get(type(exc), "ERROR")
        logger.debug("%s failed with %s: %s", op, code, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=str(exc), detail=dict(detail)),
        )
