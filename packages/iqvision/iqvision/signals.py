"""In-process pub/sub bus for state change notifications."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

STATE_CHANGED = "state_changed"
MODE_CHANGED = "mode_changed"
SPLASH_DONE = "splash_done"


class SignalBus:
    """Dispatches signals to subscribers.

    ``emit`` delivers synchronously. ``publish`` queues until ``flush``;
    signals published by handlers during a flush are delivered by that same
    flush, after everything queued before them.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def emit(self, signal_name: str, **data: Any) -> None:
        # Copy so handlers may (un)subscribe while being dispatched.
        for handler in list(self._subscribers.get(signal_name, ())):
            handler(signal_name, data)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> None:
        while self._queue:
            signal_name, data = self._queue.pop(0)
            self.emit(signal_name, **data)
