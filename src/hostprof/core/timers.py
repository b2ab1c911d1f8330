"""Repeating timers on the asyncio event loop.

Callbacks fire on the loop thread, so they never overlap with other
loop-driven state changes.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Protocol

import structlog

logger = structlog.get_logger()


class Cancellable(Protocol):
    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Cancellable]
"""Start a repeating timer: ``factory(interval_sec, callback) -> handle``."""


class RepeatingTimer:
    """Invokes ``callback`` every ``interval`` seconds until cancelled.

    Each tick re-arms with ``loop.call_later`` after the callback returns,
    so a slow callback delays the next tick instead of stacking them.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self._callback = callback
        self._loop = loop or asyncio.get_running_loop()
        self._handle: asyncio.TimerHandle | None = None
        self._cancelled = False
        self.ticks = 0
        self._arm()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _arm(self) -> None:
        self._handle = self._loop.call_later(self.interval, self._fire)

    def _fire(self) -> None:
        self._handle = None
        if self._cancelled:
            return
        self.ticks += 1
        try:
            self._callback()
        except Exception:
            logger.exception("timer_callback_failed", interval=self.interval)
        if not self._cancelled:
            self._arm()

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


def start_repeating_timer(interval: float, callback: Callable[[], None]) -> RepeatingTimer:
    """Default ``TimerFactory``; must be called from the loop thread."""
    return RepeatingTimer(interval, callback)
