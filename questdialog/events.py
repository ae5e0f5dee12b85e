"""A small multicast signal for notifying listeners of quest changes."""

from __future__ import annotations

from typing import Any, Callable


class Signal:
    """Holds handlers and calls each of them, in order, on emit."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> None:
        """Add a handler; a handler already connected is not added twice."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Callable[..., Any]) -> None:
        """Remove a handler; removing one that is not connected does nothing."""
        self._handlers = [h for h in self._handlers if h != handler]

    def emit(self, *args: Any) -> None:
        """Call every connected handler with the given arguments."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)