"""Worker capabilities that produce profiling sessions."""

from hostprof.worker.cprofile import CProfileSession, CProfileWorker, build_artifact

__all__ = ["CProfileSession", "CProfileWorker", "build_artifact"]
