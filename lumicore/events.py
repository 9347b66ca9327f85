"""A minimal signal that calls its connected callbacks in order."""

from __future__ import annotations

import threading
from typing import Any, Callable, List


class Signal:
    """A list of callbacks that are all called when the signal is emitted.

    A callback may be connected more than once and is then called once per
    connection.
    """

    def __init__(self) -> None:
        self._callbacks: List[Callable[..., Any]] = []
        self._lock = threading.Lock()

    def connect(self, callback: Callable[..., Any]) -> None:
        """Call ``callback`` on every later emission."""
        if not callable(callback):
            raise TypeError("callback must be callable")
        with self._lock:
            self._callbacks.append(callback)

    def disconnect(self, callback: Callable[..., Any]) -> None:
        """Remove every connection of ``callback``."""
        with self._lock:
            remaining = [cb for cb in self._callbacks if cb != callback]
            if len(remaining) == len(self._callbacks):
                raise ValueError("callback is not connected")
            self._callbacks = remaining

    def emit(self, *args: Any) -> None:
        """Call all connected callbacks with ``args``."""
        with self._lock:
            callbacks = list(self._callbacks)
        for callback in callbacks:
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)