"""hostprof error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Profiling
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Profiling (3xxx)
    PROFILING_START_FAILED = 3001
    PROFILING_STOP_FAILED = 3002
    PROFILING_SESSION_CLOSED = 3003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class HostProfError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(HostProfError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ProfilingError(HostProfError):
    """Errors raised by a worker while starting or stopping a profile."""

    @classmethod
    def start_failed(cls, reason: str) -> "ProfilingError":
        return cls(
            code=ErrorCode.PROFILING_START_FAILED,
            message=f"Could not start profiling: {reason}",
            details={"reason": reason},
        )

    @classmethod
    def stop_failed(cls, session_id: str, reason: str) -> "ProfilingError":
        return cls(
            code=ErrorCode.PROFILING_STOP_FAILED,
            message=f"Could not capture profile for session {session_id}: {reason}",
            details={"session_id": session_id, "reason": reason},
        )

    @classmethod
    def session_closed(cls, session_id: str) -> "ProfilingError":
        return cls(
            code=ErrorCode.PROFILING_SESSION_CLOSED,
            message=f"Profiling session {session_id} was already stopped",
            details={"session_id": session_id},
        )


class InternalError(HostProfError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
