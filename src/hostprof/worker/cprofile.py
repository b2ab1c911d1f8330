"""Worker capability backed by ``cProfile`` in the current process.

Profiles whatever runs on the event loop thread between start and stop.
Python allows one active profiler per thread, so starting while another
tool (or another session) is profiling fails with the interpreter's error.
"""

from __future__ import annotations

import cProfile
import pstats
import time
from dataclasses import dataclass, field
from uuid import uuid4

import structlog

from hostprof.config.models import WorkerConfig
from hostprof.core.errors import ProfilingError
from hostprof.session.models import FunctionTiming, ProfileArtifact

logger = structlog.get_logger()


def build_artifact(
    profile: cProfile.Profile,
    *,
    session_id: str,
    started_at: float,
    ended_at: float,
    max_entries: int,
) -> ProfileArtifact:
    """Collapse raw profiler stats into an artifact, by cumulative time."""
    stats = pstats.Stats(profile)
    raw = stats.stats  # type: ignore[attr-defined]
    timings = [
        FunctionTiming(
            filename=filename,
            line=line,
            function=function,
            call_count=call_count,
            total_time=total_time,
            cumulative_time=cumulative_time,
        )
        for (filename, line, function), (_, call_count, total_time, cumulative_time, _) in raw.items()
    ]
    timings.sort(key=lambda t: t.cumulative_time, reverse=True)
    return ProfileArtifact(
        session_id=session_id,
        started_at=started_at,
        ended_at=ended_at,
        entries=tuple(timings[:max_entries]),
    )


@dataclass
class CProfileSession:
    """One enabled profiler. ``stop()`` may succeed only once."""

    session_id: str
    profile: cProfile.Profile
    started_at: float
    max_entries: int

    _stopped: bool = field(default=False, init=False)

    async def stop(self) -> ProfileArtifact:
        if self._stopped:
            raise ProfilingError.session_closed(self.session_id)
        self._stopped = True
        self.profile.disable()
        ended_at = time.time()

        try:
            artifact = build_artifact(
                self.profile,
                session_id=self.session_id,
                started_at=self.started_at,
                ended_at=ended_at,
                max_entries=self.max_entries,
            )
        except TypeError as e:
            # pstats refuses a profile that recorded nothing
            raise ProfilingError.stop_failed(self.session_id, str(e)) from e

        logger.debug("cprofile_session_stopped", session_id=self.session_id)
        return artifact


@dataclass
class CProfileWorker:
    """Starts ``cProfile`` sessions on the calling thread."""

    config: WorkerConfig = field(default_factory=WorkerConfig)

    async def start_profiling_session(self) -> CProfileSession:
        profile = cProfile.Profile(builtins=self.config.builtins)
        try:
            profile.enable()
        except ValueError as e:
            raise ProfilingError.start_failed(str(e)) from e

        session = CProfileSession(
            session_id=uuid4().hex[:12],
            profile=profile,
            started_at=time.time(),
            max_entries=self.config.max_entries,
        )
        logger.debug("cprofile_session_started", session_id=session.session_id)
        return session
