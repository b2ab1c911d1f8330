"""Live status indicator showing elapsed profiling time.

Two states: hidden (initial) and visible. ``show()`` is the only way in and
``hide()`` the only way out; the refresh timer exists exactly while visible.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable

import structlog

from hostprof.config.models import IndicatorConfig
from hostprof.core.lifecycle import DisposableStore
from hostprof.core.timers import Cancellable, TimerFactory, start_repeating_timer
from hostprof.indicator.surface import StatusContainer, StatusElement

logger = structlog.get_logger()

ITEM_ID = "hostprof.profile-status"

ClickHandler = Callable[[], None]


def format_label(label: str, elapsed: float | None) -> str:
    """Label text, with whole elapsed seconds (half rounds up) when known."""
    if elapsed is None:
        return label
    seconds = math.floor(max(0.0, elapsed) + 0.5)
    return f"{label} ({seconds} sec)"


class LiveIndicator:
    """Status item that ticks once per refresh interval while profiling runs.

    Rendered onto a container once; afterwards ``show``/``hide`` only flip
    visibility, manage the timer and swap the click handler.
    """

    def __init__(
        self,
        config: IndicatorConfig | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        timer_factory: TimerFactory = start_repeating_timer,
    ) -> None:
        self._config = config or IndicatorConfig()
        self._clock = clock
        self._timer_factory = timer_factory
        self._element: StatusElement | None = None
        self._disposables = DisposableStore()
        self._origin: float | None = None
        self._timer: Cancellable | None = None
        self._click_handler: ClickHandler | None = None
        self._visible = False
        self._label = format_label(self._config.label, None)

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def label(self) -> str:
        return self._label

    @property
    def origin(self) -> float | None:
        return self._origin

    @property
    def has_timer(self) -> bool:
        return self._timer is not None

    @property
    def has_click_handler(self) -> bool:
        return self._click_handler is not None

    def render(self, container: StatusContainer) -> LiveIndicator:
        """Attach to ``container``. Only the first call creates an element."""
        if self._element is not None:
            return self

        element = container.create_item(ITEM_ID)
        self._disposables.add(element.on_click(lambda _: self.click()))
        element.title = self._config.tooltip
        self._element = element
        self._update_label()
        element.hidden = not self._visible
        return self

    def show(self, on_click: ClickHandler) -> None:
        if self._visible:
            self._click_handler = on_click
            return

        # Nothing changes if the timer cannot be created
        timer = self._timer_factory(self._config.refresh_interval_sec, self._update_label)
        self._cancel_timer()
        self._timer = timer
        self._click_handler = on_click
        self._visible = True
        self._origin = self._clock()
        if self._element is not None:
            self._element.hidden = False
        self._update_label()
        logger.debug("indicator_shown")

    def hide(self) -> None:
        self._click_handler = None
        was_visible = self._visible
        self._visible = False
        self._origin = None
        if self._element is not None:
            self._element.hidden = True
        self._cancel_timer()
        if was_visible:
            logger.debug("indicator_hidden")

    def click(self) -> None:
        """Forward a user interaction to the current handler, if any."""
        handler = self._click_handler
        if handler is not None:
            handler()

    def dispose(self) -> None:
        self.hide()
        self._disposables.dispose()

    def _cancel_timer(self) -> None:
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()

    def _update_label(self) -> None:
        elapsed = None if self._origin is None else self._clock() - self._origin
        self._label = format_label(self._config.label, elapsed)
        if self._element is not None:
            self._element.text = self._label
