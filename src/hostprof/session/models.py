"""Session state and profile artifact types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ProfileSessionState(Enum):
    """Profiling session lifecycle.

    Transitions: IDLE -> STARTING -> (RUNNING | IDLE), RUNNING -> STOPPING -> IDLE.
    """

    IDLE = "idle"
    STARTING = "starting"
    RUNNING = "running"
    STOPPING = "stopping"


@dataclass(frozen=True, slots=True)
class FunctionTiming:
    """Aggregated timing for one profiled function."""

    filename: str
    line: int
    function: str
    call_count: int
    total_time: float
    cumulative_time: float


@dataclass(frozen=True)
class ProfileArtifact:
    """Result of one completed profiling run. Never mutated once built."""

    session_id: str
    started_at: float
    ended_at: float
    entries: tuple[FunctionTiming, ...] = field(default_factory=tuple)

    @property
    def duration(self) -> float:
        return max(0.0, self.ended_at - self.started_at)

    @property
    def function_count(self) -> int:
        return len(self.entries)
