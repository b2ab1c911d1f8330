"""Observer registration with disposer handles.

An ``Emitter`` is owned by the component that fires it; observers only ever
see its ``event`` view, which can subscribe but not fire::

    self._changed: Emitter[State] = Emitter()
    self.changed = self._changed.event

    registration = owner.changed.subscribe(on_change)
    ...
    registration.dispose()
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

import structlog

from hostprof.core.lifecycle import Disposable, to_disposable

logger = structlog.get_logger()

T = TypeVar("T")

Listener = Callable[[T], None]


class Event(Generic[T]):
    """Subscription-only view of an emitter."""

    __slots__ = ("_emitter",)

    def __init__(self, emitter: Emitter[T]) -> None:
        self._emitter = emitter

    def subscribe(self, listener: Listener[T]) -> Disposable:
        return self._emitter.subscribe(listener)


class Emitter(Generic[T]):
    """Synchronous fan-out to registered listeners.

    Listeners run in registration order. A listener that raises is logged and
    skipped; the remaining listeners still receive the value.
    """

    def __init__(self, name: str = "event") -> None:
        self._name = name
        self._listeners: list[Listener[T]] = []
        self._disposed = False
        self.event: Event[T] = Event(self)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener[T]) -> Disposable:
        if self._disposed:
            return to_disposable(lambda: None)

        # Wrapper keeps registrations distinct when the same callable subscribes twice
        entry: Listener[T] = lambda value: listener(value)  # noqa: E731
        self._listeners.append(entry)

        def _remove() -> None:
            if entry in self._listeners:
                self._listeners.remove(entry)

        return to_disposable(_remove)

    def fire(self, value: T) -> None:
        # Snapshot so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            if listener not in self._listeners:
                continue
            try:
                listener(value)
            except Exception:
                logger.exception("event_listener_failed", emitter=self._name)

    def dispose(self) -> None:
        self._disposed = True
        self._listeners.clear()
