"""Presentation surface the status indicator renders onto.

``StatusContainer`` hands out ``StatusElement`` items. An element exposes a
visibility flag, a text label, a tooltip and a click-event source; that is
the whole contract the indicator relies on.

``StatusBar`` is the in-memory implementation used by headless callers and
tests; ``StatusBarItem.click()`` stands in for a user interaction.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from hostprof.core.events import Emitter
from hostprof.core.lifecycle import Disposable


class StatusElement(Protocol):
    hidden: bool
    text: str
    title: str

    def on_click(self, listener: Callable[[None], None]) -> Disposable: ...


class StatusContainer(Protocol):
    def create_item(self, item_id: str) -> StatusElement: ...


class StatusBarItem:
    """Headless status element."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        self.hidden = True
        self.text = ""
        self.title = ""
        self._clicks: Emitter[None] = Emitter(f"{item_id}.click")

    def on_click(self, listener: Callable[[None], None]) -> Disposable:
        return self._clicks.subscribe(listener)

    @property
    def click_listener_count(self) -> int:
        return self._clicks.listener_count

    def click(self) -> None:
        self._clicks.fire(None)


class StatusBar:
    """Headless container. Items keep their creation order."""

    def __init__(self) -> None:
        self.items: dict[str, StatusBarItem] = {}

    def create_item(self, item_id: str) -> StatusBarItem:
        if item_id in self.items:
            raise ValueError(f"Status item already exists: {item_id}")
        item = self._new_item(item_id)
        self.items[item_id] = item
        return item

    def _new_item(self, item_id: str) -> StatusBarItem:
        return StatusBarItem(item_id)
