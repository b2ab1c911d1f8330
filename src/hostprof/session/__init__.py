"""Profiling session state machine and its collaborator protocols."""

from hostprof.session.controller import ProfilingSessionController
from hostprof.session.models import FunctionTiming, ProfileArtifact, ProfileSessionState
from hostprof.session.protocols import ProfileSession, ResultsOpener, WorkerProfiler

__all__ = [
    "FunctionTiming",
    "ProfileArtifact",
    "ProfileSession",
    "ProfileSessionState",
    "ProfilingSessionController",
    "ResultsOpener",
    "WorkerProfiler",
]
