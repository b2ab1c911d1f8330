"""Status indicator driven by the profiling session state."""

from hostprof.indicator.console import ConsoleStatusBar, ConsoleStatusItem
from hostprof.indicator.status_item import LiveIndicator, format_label
from hostprof.indicator.surface import StatusBar, StatusBarItem, StatusContainer, StatusElement

__all__ = [
    "ConsoleStatusBar",
    "ConsoleStatusItem",
    "LiveIndicator",
    "StatusBar",
    "StatusBarItem",
    "StatusContainer",
    "StatusElement",
    "format_label",
]
