"""Core module exports."""

from hostprof.core.errors import (
    ConfigError,
    ErrorCode,
    HostProfError,
    InternalError,
    ProfilingError,
)
from hostprof.core.events import Emitter, Event
from hostprof.core.lifecycle import Disposable, DisposableStore, to_disposable
from hostprof.core.logging import configure_logging, get_logger
from hostprof.core.reporting import ErrorReporter
from hostprof.core.timers import RepeatingTimer, TimerFactory, start_repeating_timer

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "HostProfError",
    "InternalError",
    "ProfilingError",
    # Events and lifecycle
    "Disposable",
    "DisposableStore",
    "Emitter",
    "ErrorReporter",
    "Event",
    "to_disposable",
    # Logging
    "configure_logging",
    "get_logger",
    # Timers
    "RepeatingTimer",
    "TimerFactory",
    "start_repeating_timer",
]
