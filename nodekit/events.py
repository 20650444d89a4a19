"""A minimal event emitter with persistent and one-shot listeners."""

from __future__ import annotations

from typing import Any, Callable

MAX_EVENTS = 1024


class _Listener:
    """Handle for one registered callback."""

    __slots__ = ("func", "once", "active")

    def __init__(self, func: Callable[..., Any], once: bool) -> None:
        self.func = func
        self.once = once
        self.active = True

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return f"<listener {self.func!r} once={self.once} {state}>"


class Event:
    """Calls every registered listener, in registration order, on ``emit``."""

    def __init__(self, limit: int = MAX_EVENTS) -> None:
        self._limit = limit
        self._listeners: list[_Listener] = []

    def __call__(self, func: Callable[..., Any]) -> _Listener | None:
        return self.on(func)

    def __len__(self) -> int:
        return len(self._listeners)

    def _add(self, func: Callable[..., Any], once: bool) -> _Listener | None:
        if len(self._listeners) >= self._limit:
            return None
        listener = _Listener(func, once)
        self._listeners.append(listener)
        return listener

    def on(self, func: Callable[..., Any]) -> _Listener | None:
        """Register ``func`` for every emit; None when the limit is reached."""
        return self._add(func, False)

    def once(self, func: Callable[..., Any]) -> _Listener | None:
        """Register ``func`` for the next emit only; None when the limit is reached."""
        return self._add(func, True)

    def off(self, handle: _Listener | None) -> None:
        """Stop the listener behind ``handle``; unknown handles are ignored."""
        if handle is None:
            return
        handle.active = False
        try:
            self._listeners.remove(handle)
        except ValueError:
            pass

    def emit(self, *args: Any) -> None:
        for listener in list(self._listeners):
            if not listener.active:
                continue
            if listener.once:
                self.off(listener)
            listener.func(*args)

    def clear(self) -> None:
        for listener in self._listeners:
            listener.active = False
        self._listeners.clear()

    def empty(self) -> bool:
        return not self._listeners