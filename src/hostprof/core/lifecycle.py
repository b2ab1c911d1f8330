"""Disposable resources and scoped teardown.

Timers, listener registrations and emitters all hand back a ``Disposable``.
Owners collect them in a ``DisposableStore`` and release everything from a
single ``dispose()`` call.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeVar, runtime_checkable

import structlog

logger = structlog.get_logger()


@runtime_checkable
class Disposable(Protocol):
    def dispose(self) -> None: ...


_D = TypeVar("_D", bound=Disposable)


class _CallbackDisposable:
    """Runs a release callback at most once."""

    __slots__ = ("_callback",)

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback: Callable[[], None] | None = callback

    def dispose(self) -> None:
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()


def to_disposable(callback: Callable[[], None]) -> Disposable:
    """Wrap a release callback; repeated dispose calls run it only once."""
    return _CallbackDisposable(callback)


class DisposableStore:
    """Collects disposables and releases them together.

    Adding to a store that was already disposed releases the new item
    immediately instead of leaking it.
    """

    def __init__(self) -> None:
        self._items: list[Disposable] = []
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def __len__(self) -> int:
        return len(self._items)

    def add(self, item: _D) -> _D:
        if self._disposed:
            logger.warning("disposable_added_after_dispose", item=type(item).__name__)
            item.dispose()
        else:
            self._items.append(item)
        return item

    def clear(self) -> None:
        """Release every held item but keep the store usable."""
        items, self._items = self._items, []
        # Reverse order: later registrations may depend on earlier ones
        for item in reversed(items):
            item.dispose()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self.clear()
