"""Minimal observable value used by the progress store."""

from __future__ import annotations

import threading
from typing import Callable, Generic, List, TypeVar

from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

T = TypeVar("T")
Listener = Callable[[T], None]


class ObservableValue(Generic[T]):
    """Holds the last committed value and notifies listeners of changes.

    ``get`` returns a snapshot. Storing a value and notifying listeners are
    separate steps so an owner can store under its own lock and notify after
    releasing it.
    """

    def __init__(self, name: str, initial: T) -> None:
        self.name = name
        self._value = initial
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()

    def get(self) -> T:
        with self._lock:
            return self._value

    def subscribe(self, listener: Listener, *, emit_current: bool = False) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""

        with self._lock:
            self._listeners.append(listener)
            current = self._value
        if emit_current:
            listener(current)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _set(self, value: T) -> None:
        with self._lock:
            self._value = value

    def _notify(self, value: T) -> None:
        with self._lock:
            listeners = list(self._listeners)
        LOGGER.debug("Publishing %s to %d listener(s)", self.name, len(listeners))
        for listener in listeners:
            listener(value)
