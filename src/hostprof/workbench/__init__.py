"""Composition of controller, indicator and results view."""

from hostprof.workbench.profiling import ProfilingWorkbench
from hostprof.workbench.results import ConsoleResultsView, describe_artifact

__all__ = ["ConsoleResultsView", "ProfilingWorkbench", "describe_artifact"]
