"""An insertion-ordered map whose lookups create missing entries."""

from __future__ import annotations

from typing import Any, Hashable, Iterator

from nodekit.array import Array


class OrderedMap:
    """Key/value store that keeps insertion order.

    Reading a missing key inserts it with the value None, as an
    auto-vivifying map would.
    """

    __slots__ = ("_data",)

    def __init__(self, *args: tuple[Hashable, Any]) -> None:
        self._data: dict[Hashable, Any] = {}
        for key, value in args:
            self._data[key] = value

    def __getitem__(self, key: Hashable) -> Any:
        return self._data.setdefault(key, None)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self._data[key] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"OrderedMap({', '.join(repr(item) for item in self._data.items())})"

    def keys(self) -> Array:
        return Array(self._data)

    def items(self) -> list[tuple[Hashable, Any]]:
        return list(self._data.items())

    def has(self, key: Hashable) -> bool:
        return key in self._data

    def erase(self, key: Hashable) -> None:
        """Remove ``key`` if present."""
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()