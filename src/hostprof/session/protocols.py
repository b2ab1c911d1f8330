"""Capabilities the controller consumes but does not implement."""

from __future__ import annotations

from typing import Protocol

from hostprof.session.models import ProfileArtifact


class ProfileSession(Protocol):
    """Handle to one in-progress profiling run on the worker."""

    async def stop(self) -> ProfileArtifact: ...


class WorkerProfiler(Protocol):
    """Worker able to begin a profiling run."""

    async def start_profiling_session(self) -> ProfileSession: ...


class ResultsOpener(Protocol):
    """Displays the most recent profile to the user."""

    def open_results(self) -> None: ...
