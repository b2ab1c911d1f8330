"""Config module exports."""

from hostprof.config.loader import HostProfSettings, load_config
from hostprof.config.models import (
    HostProfConfig,
    IndicatorConfig,
    LoggingConfig,
    LogOutputConfig,
    WorkerConfig,
)

__all__ = [
    "load_config",
    "HostProfConfig",
    "HostProfSettings",
    "IndicatorConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "WorkerConfig",
]
