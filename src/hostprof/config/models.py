"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (HOSTPROF__SECTION__KEY)
3. Project YAML (<root>/.hostprof/config.yaml)
4. Global YAML (~/.config/hostprof/config.yaml)
5. Built-in defaults (this file)

Examples:
    HOSTPROF__LOGGING__LEVEL=DEBUG
    HOSTPROF__INDICATOR__REFRESH_INTERVAL_SEC=0.5
    HOSTPROF__WORKER__MAX_ENTRIES=50
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        HOSTPROF__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every session state transition.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class IndicatorConfig(BaseModel):
    """Live status indicator configuration.

    Env vars:
        HOSTPROF__INDICATOR__LABEL: Label text shown while profiling
        HOSTPROF__INDICATOR__TOOLTIP: Hover text for the indicator
        HOSTPROF__INDICATOR__REFRESH_INTERVAL_SEC: Seconds between label redraws
    """

    label: str = Field(
        default="Profiling Extension Host",
        description="Label text. Elapsed seconds are appended while visible.",
    )
    tooltip: str = Field(
        default="Click to stop profiling.",
        description="Hover text for the indicator.",
    )
    refresh_interval_sec: float = Field(
        default=1.0,
        description="Seconds between label redraws while profiling.",
    )

    @field_validator("refresh_interval_sec")
    @classmethod
    def validate_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Refresh interval must be positive, got {v}")
        return v


class WorkerConfig(BaseModel):
    """In-process cProfile worker configuration.

    Env vars:
        HOSTPROF__WORKER__MAX_ENTRIES: Functions kept in a captured profile
        HOSTPROF__WORKER__BUILTINS: Also profile calls into builtins
    """

    max_entries: int = Field(
        default=200,
        description="Functions kept in a captured profile, by cumulative time.",
    )
    builtins: bool = Field(
        default=False,
        description="Record calls into C builtins. Increases overhead.",
    )

    @field_validator("max_entries")
    @classmethod
    def validate_max_entries(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_entries must be at least 1, got {v}")
        return v


class HostProfConfig(BaseModel):
    """Root configuration for hostprof."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    indicator: IndicatorConfig = Field(default_factory=IndicatorConfig)
    worker: WorkerConfig = Field(default_factory=WorkerConfig)
