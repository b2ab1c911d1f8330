"""Composition root tying the session controller to the live indicator.

The controller knows nothing about presentation. The workbench subscribes to
``state_changed`` and drives the indicator from it: RUNNING shows it, every
other state hides it, so the indicator is visible exactly while a session
runs.
"""

from __future__ import annotations

import time
from collections.abc import Callable

import structlog

from hostprof.config.models import HostProfConfig
from hostprof.core.lifecycle import Disposable, DisposableStore
from hostprof.core.reporting import ErrorReporter
from hostprof.core.timers import TimerFactory, start_repeating_timer
from hostprof.indicator.status_item import LiveIndicator
from hostprof.indicator.surface import StatusContainer
from hostprof.session.controller import ProfilingSessionController
from hostprof.session.models import ProfileSessionState
from hostprof.session.protocols import ResultsOpener, WorkerProfiler

logger = structlog.get_logger()


class ProfilingWorkbench:
    """Owns one controller and one indicator for the application's lifetime.

    ``results_view`` builds the results opener from the controller, since a
    view usually needs the controller to read the last artifact.
    """

    def __init__(
        self,
        worker: WorkerProfiler,
        container: StatusContainer,
        results_view: Callable[[ProfilingSessionController], ResultsOpener],
        config: HostProfConfig | None = None,
        *,
        reporter: ErrorReporter | None = None,
        clock: Callable[[], float] = time.monotonic,
        timer_factory: TimerFactory = start_repeating_timer,
    ) -> None:
        config = config or HostProfConfig()
        self.reporter = reporter or ErrorReporter()
        self.controller = ProfilingSessionController(worker=worker, reporter=self.reporter)
        self.indicator = LiveIndicator(
            config.indicator,
            clock=clock,
            timer_factory=timer_factory,
        ).render(container)
        self.results_opener = results_view(self.controller)
        self._disposables = DisposableStore()
        self._disposables.add(self.controller.state_changed.subscribe(self._on_state_changed))

    def _on_state_changed(self, state: ProfileSessionState) -> None:
        if state is ProfileSessionState.RUNNING:
            self.indicator.show(self._stop_and_open_results)
        else:
            self.indicator.hide()

    def _stop_and_open_results(self) -> None:
        logger.info("indicator_clicked")
        self.controller.stop()
        self.results_opener.open_results()

    def dispose(self) -> None:
        self._disposables.dispose()
        self.indicator.dispose()
        if isinstance(self.results_opener, Disposable):
            self.results_opener.dispose()
        self.controller.dispose()
