"""Shared channel for errors that nobody awaits.

Worker failures surface inside background tasks where no caller can catch
them. Those go through ``ErrorReporter.report``: fire-and-forget, never
raises.
"""

from __future__ import annotations

import structlog

from hostprof.core.errors import HostProfError, InternalError
from hostprof.core.events import Emitter, Event

logger = structlog.get_logger()


class ErrorReporter:
    """Logs unexpected errors and fans them out to subscribers."""

    def __init__(self) -> None:
        self._on_error: Emitter[BaseException] = Emitter("unexpected_error")
        self.on_error: Event[BaseException] = self._on_error.event
        self._count = 0

    @property
    def report_count(self) -> int:
        return self._count

    def report(self, error: BaseException) -> None:
        self._count += 1
        if isinstance(error, HostProfError):
            typed, exc_info = error, None
        else:
            typed = InternalError.unexpected(str(error), error_type=type(error).__name__)
            exc_info = error
        logger.error(
            "unexpected_error",
            code=typed.code.value,
            error=typed.error_name,
            message=typed.message,
            exc_info=exc_info,
            details=typed.details,
        )
        self._on_error.fire(error)

    def dispose(self) -> None:
        self._on_error.dispose()
