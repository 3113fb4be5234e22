"""A small thread-safe multicast event."""

from __future__ import annotations

import threading
from typing import Any, Callable

Handler = Callable[[Any, Any], None]


class Event:
    """Holds handlers that are called in order with ``(sender, arg)``."""

    def __init__(self) -> None:
        self._handlers: list[Handler] = []
        self._lock = threading.Lock()

    def reaction(self, func: Handler) -> Handler:
        """Subscribe ``func`` and return it, so it can later be removed."""
        if not callable(func):
            raise TypeError("event handler must be callable")
        with self._lock:
            self._handlers.append(func)
        return func

    def remove_reaction(self, func: Handler) -> None:
        """Unsubscribe every handler equal to ``func``.

        Bound methods compare equal when they wrap the same function of the
        same instance, so ``obj.method`` can be removed by naming it again.
        """
        with self._lock:
            self._handlers = [h for h in self._handlers if h != func]

    def remove_all_reactions(self) -> None:
        """Unsubscribe every handler."""
        with self._lock:
            self._handlers.clear()

    def fire(self, sender: Any, arg: Any) -> None:
        """Call every handler, in subscription order, with ``sender`` and ``arg``."""
        with self._lock:
            handlers = list(self._handlers)
        for handler in handlers:
            handler(sender, arg)

    def __len__(self) -> int:
        with self._lock:
            return len(self._handlers)