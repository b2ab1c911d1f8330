"""Profiling session state machine.

Runs entirely on one asyncio event loop. Worker calls are submitted as tasks
and their completions mutate state on the loop thread, so transitions never
interleave and no locks are needed.

Overlapping requests are dropped rather than queued: ``start()`` outside
IDLE and ``stop()`` outside RUNNING return without touching anything. That
also means a stop can never reach a handle that has not arrived yet, and a
handle is stopped at most once.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from dataclasses import dataclass, field
from typing import Any

import structlog

from hostprof.core.events import Emitter, Event
from hostprof.core.reporting import ErrorReporter
from hostprof.session.models import ProfileArtifact, ProfileSessionState
from hostprof.session.protocols import ProfileSession, WorkerProfiler

logger = structlog.get_logger()


@dataclass
class ProfilingSessionController:
    """Owns the session state, the active handle and the last artifact.

    Notifications fire after the corresponding field is fully updated:
    - ``state_changed`` carries the new state
    - ``last_artifact_changed`` carries the new artifact (possibly None)
    """

    worker: WorkerProfiler
    reporter: ErrorReporter = field(default_factory=ErrorReporter)

    _state: ProfileSessionState = field(default=ProfileSessionState.IDLE, init=False)
    _session: ProfileSession | None = field(default=None, init=False)
    _artifact: ProfileArtifact | None = field(default=None, init=False)
    _pending: set[asyncio.Task[None]] = field(default_factory=set, init=False)
    _state_emitter: Emitter[ProfileSessionState] = field(init=False)
    _artifact_emitter: Emitter[ProfileArtifact | None] = field(init=False)
    state_changed: Event[ProfileSessionState] = field(init=False)
    last_artifact_changed: Event[ProfileArtifact | None] = field(init=False)

    def __post_init__(self) -> None:
        self._state_emitter = Emitter("profiling_state_changed")
        self._artifact_emitter = Emitter("last_artifact_changed")
        self.state_changed = self._state_emitter.event
        self.last_artifact_changed = self._artifact_emitter.event

    @property
    def state(self) -> ProfileSessionState:
        return self._state

    @property
    def active_session(self) -> ProfileSession | None:
        return self._session

    @property
    def last_artifact(self) -> ProfileArtifact | None:
        return self._artifact

    def start(self) -> asyncio.Task[None] | None:
        """Begin a profiling session unless one is already underway.

        Returns the task that completes the transition, or None when the call
        was ignored. The task never raises; failures are reported and end in
        IDLE.

        Raises:
            RuntimeError: When called outside a running event loop. Nothing
                changes state in that case.
        """
        if self._state is not ProfileSessionState.IDLE:
            return None

        loop = asyncio.get_running_loop()
        self._set_state(ProfileSessionState.STARTING)
        return self._submit(loop, self._start_session())

    def stop(self) -> asyncio.Task[None] | None:
        """Stop the running session and capture its artifact.

        The handle is detached before this returns, so a second ``stop()``
        sees STOPPING and is ignored. Like ``start()``, it raises
        ``RuntimeError`` outside a running event loop.
        """
        if self._state is not ProfileSessionState.RUNNING or self._session is None:
            return None

        loop = asyncio.get_running_loop()
        session, self._session = self._session, None
        self._set_state(ProfileSessionState.STOPPING)
        return self._submit(loop, self._stop_session(session))

    def get_last_artifact(self) -> ProfileArtifact | None:
        return self._artifact

    def clear_last_artifact(self) -> None:
        self._set_last_artifact(None)

    def dispose(self) -> None:
        """Detach every listener. In-flight worker calls are left to finish."""
        self._state_emitter.dispose()
        self._artifact_emitter.dispose()

    async def _start_session(self) -> None:
        try:
            session = await self.worker.start_profiling_session()
        except asyncio.CancelledError:
            self._set_state(ProfileSessionState.IDLE)
            raise
        except Exception as e:
            self._report(e)
            self._set_state(ProfileSessionState.IDLE)
            return

        self._session = session
        self._set_state(ProfileSessionState.RUNNING)

    async def _stop_session(self, session: ProfileSession) -> None:
        try:
            artifact = await session.stop()
        except asyncio.CancelledError:
            self._set_state(ProfileSessionState.IDLE)
            raise
        except Exception as e:
            # The session is over either way; no retry
            self._report(e)
            self._set_state(ProfileSessionState.IDLE)
            return

        self._set_last_artifact(artifact)
        self._set_state(ProfileSessionState.IDLE)

    def _report(self, error: Exception) -> None:
        try:
            self.reporter.report(error)
        except Exception:
            logger.exception("error_report_failed", error=type(error).__name__)

    def _submit(
        self,
        loop: asyncio.AbstractEventLoop,
        coro: Coroutine[Any, Any, None],
    ) -> asyncio.Task[None]:
        # Hold a reference until done; the loop only keeps weak ones
        task = loop.create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    def _set_state(self, state: ProfileSessionState) -> None:
        if self._state is state:
            return
        previous, self._state = self._state, state
        logger.debug(
            "profiling_state_changed",
            from_state=previous.value,
            to_state=state.value,
        )
        self._state_emitter.fire(state)

    def _set_last_artifact(self, artifact: ProfileArtifact | None) -> None:
        self._artifact = artifact
        if artifact is not None:
            logger.info(
                "profile_captured",
                session_id=artifact.session_id,
                duration_sec=round(artifact.duration, 3),
                functions=artifact.function_count,
            )
        self._artifact_emitter.fire(artifact)
