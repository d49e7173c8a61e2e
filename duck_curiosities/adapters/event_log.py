"""Event log adapter writing structured request/response/error records."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from duck_curiosities.core.logging import get_logger


class JsonEventLogAdapter:
    """Implement :class:`EventLogPort` on top of the shared JSON logger."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger("duck_curiosities.events")

    def log_request(self, payload: Mapping[str, Any]) -> None:
        self._logger.info(
            "Incoming request", extra={"event": "skill_request", "request": dict(payload)}
        )

    def log_response(self, payload: Mapping[str, Any]) -> None:
        self._logger.info(
            "Outgoing response", extra={"event": "skill_response", "response": dict(payload)}
        )

    def log_error(self, error: BaseException, payload: Mapping[str, Any]) -> None:
        self._logger.error(
            "Error handled",
            extra={
                "event": "skill_error",
                "error_type": type(error).__name__,
                "error": str(error),
                "request": dict(payload),
            },
            exc_info=(type(error), error, error.__traceback__),
        )


__all__ = ["JsonEventLogAdapter"]
