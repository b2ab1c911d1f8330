"""Rich-backed status surface for terminal use.

A visible item owns a transient ``Live`` region on stderr. Console logging
is suppressed while the region is up so log lines do not tear it.
"""

from __future__ import annotations

from rich.console import Console
from rich.live import Live
from rich.text import Text

from hostprof.core.logging import restore_console_logs, suppress_console_logs
from hostprof.indicator.surface import StatusBar, StatusBarItem


class ConsoleStatusItem(StatusBarItem):
    """Status element drawn as a single live line."""

    def __init__(self, item_id: str, console: Console) -> None:
        self._console = console
        self._live: Live | None = None
        self._hidden = True
        self._text = ""
        super().__init__(item_id)

    @property
    def hidden(self) -> bool:  # type: ignore[override]
        return self._hidden

    @hidden.setter
    def hidden(self, value: bool) -> None:
        if value == self._hidden:
            return
        self._hidden = value
        if value:
            self._stop_live()
        else:
            self._start_live()

    @property
    def text(self) -> str:  # type: ignore[override]
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        if self._live is not None:
            self._live.update(self._renderable(), refresh=True)

    @property
    def is_live(self) -> bool:
        return self._live is not None

    def _renderable(self) -> Text:
        return Text.assemble(("● ", "red"), (self._text, "bold"))

    def _start_live(self) -> None:
        if self._live is not None:
            return
        suppress_console_logs()
        self._live = Live(
            self._renderable(),
            console=self._console,
            auto_refresh=False,
            transient=True,
        )
        self._live.start()

    def _stop_live(self) -> None:
        live, self._live = self._live, None
        if live is None:
            return
        try:
            live.stop()
        finally:
            restore_console_logs()


class ConsoleStatusBar(StatusBar):
    """Status bar whose items render through a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)

    def _new_item(self, item_id: str) -> StatusBarItem:
        return ConsoleStatusItem(item_id, self.console)
