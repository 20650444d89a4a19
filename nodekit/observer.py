"""Named fields whose changes notify listeners."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from nodekit.events import Event


class FieldNotFound(LookupError):
    """Raised when an unknown field is read or written."""


class Observer:
    """A fixed set of fields; setting one emits ``(old, new)`` to its listeners."""

    def __init__(self, fields: Mapping[str, Any] | Iterable[tuple[str, Any]] = ()) -> None:
        pairs = fields.items() if isinstance(fields, Mapping) else fields
        self._values: dict[str, Any] = {}
        self._events: dict[str, Event] = {}
        for name, value in pairs:
            self._values[name] = value
            self._events[name] = Event()

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Observer({self._values!r})"

    def on(self, name: str, func: Callable[[Any, Any], Any]):
        """Listen to every change of ``name``; None if the field is unknown."""
        event = self._events.get(name)
        return None if event is None else event.on(func)

    def once(self, name: str, func: Callable[[Any, Any], Any]):
        """Listen to the next change of ``name``; None if the field is unknown."""
        event = self._events.get(name)
        return None if event is None else event.once(func)

    def off(self, name: str, handle) -> None:
        event = self._events.get(name)
        if event is not None:
            event.off(handle)

    def set(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise FieldNotFound(f"field not found: {name}")
        self._events[name].emit(self._values[name], value)
        self._values[name] = value

    def update(self, func: Callable[["Observer"], Any]) -> None:
        """Apply the fields returned by ``func(self)`` (an Observer or a mapping)."""
        result = func(self)
        pairs = result._values.items() if isinstance(result, Observer) else dict(result).items()
        for name, value in list(pairs):
            self.set(name, value)

    def get(self, name: str) -> Any:
        try:
            return self._values[name]
        except KeyError:
            raise FieldNotFound(f"field not found: {name}") from None

    def clear(self, name: str | None = None) -> None:
        """Drop the listeners of one field, or of every field."""
        if name is None:
            for event in self._events.values():
                event.clear()
        elif name in self._events:
            self._events[name].clear()