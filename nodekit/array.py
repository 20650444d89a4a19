"""A list-backed sequence with JavaScript-flavoured helpers."""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


@total_ordering
class Array(Generic[T]):
    """Mutable sequence offering slice/splice/find helpers with forgiving ranges."""

    __slots__ = ("_items",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    # -- basic protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index):
        """Integer indexes wrap around the length; slices return a new Array."""
        if isinstance(index, slice):
            return Array(self._items[index])
        if not self._items:
            raise IndexError("index into an empty array")
        return self._items[index % len(self._items)]

    def __repr__(self) -> str:
        return f"Array({self._items!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: "Array[T]") -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self.compare(other) == -1

    def compare(self, other: "Array[T]") -> int:
        """Order by length first, then element-wise from the last element backwards."""
        if len(self) < len(other):
            return -1
        if len(self) > len(other):
            return 1
        for mine, theirs in zip(reversed(self._items), reversed(other._items)):
            if mine < theirs:
                return -1
            if mine > theirs:
                return 1
        return 0

    # -- queries --------------------------------------------------------

    def index_of(self, func: Callable[[T], bool]) -> int:
        return next((i for i, item in enumerate(self._items) if func(item)), -1)

    def count(self, func: Callable[[T], bool]) -> int:
        return sum(1 for item in self._items if func(item))

    def reduce(self, func: Callable[[T, T], T]) -> T:
        if not self._items:
            raise ValueError("reduce of an empty array")
        acc = self._items[0]
        for item in self._items[1:]:
            acc = func(acc, item)
        return acc

    def some(self, func: Callable[[T], bool]) -> bool:
        return any(func(item) for item in self._items)

    def none(self, func: Callable[[T], bool]) -> bool:
        return not any(func(item) for item in self._items)

    def every(self, func: Callable[[T], bool]) -> bool:
        return all(func(item) for item in self._items)

    def find(self, data: Any, offset: int = 0) -> tuple[int, int] | None:
        """Locate ``data`` (an Array for a run, anything else for one value).

        Returns ``(start, stop)`` with ``stop`` exclusive, or None.
        """
        needle = list(data) if isinstance(data, Array) else [data]
        if not needle:
            return None
        width = len(needle)
        for start in range(max(offset, 0), len(self._items) - width + 1):
            if self._items[start:start + width] == needle:
                return start, start + width
        return None

    # -- transformations ------------------------------------------------

    def remove(self, func: Callable[[T], bool]) -> "Array[T]":
        """Drop, in place, every item for which ``func`` is true."""
        self._items[:] = [item for item in self._items if not func(item)]
        return self

    def reverse(self) -> "Array[T]":
        return Array(reversed(self._items))

    def replace(self, func: Callable[[T], bool], target: T) -> "Array[T]":
        """Overwrite, in place, every item for which ``func`` is true."""
        self._items[:] = [target if func(item) else item for item in self._items]
        return self

    def sort(self, func: Callable[[T, T], bool]) -> "Array[T]":
        """Return a new Array; each item goes before the first one ``func(item, other)`` accepts."""
        result: list[T] = []
        for item in self._items:
            position = next(
                (i for i, other in enumerate(result) if func(item, other)), len(result)
            )
            result.insert(position, item)
        return Array(result)

    # -- mutation -------------------------------------------------------

    def unshift(self, value: T) -> None:
        self.insert(0, value)

    def push(self, value: T) -> None:
        self.insert(len(self._items), value)

    def shift(self) -> T | None:
        """Remove and return the first item, or None when empty."""
        return self._items.pop(0) if self._items else None

    def pop(self) -> T | None:
        """Remove and return the last item, or None when empty."""
        return self._items.pop() if self._items else None

    def insert(self, index: int, *args: Any) -> None:
        """Insert at ``index`` (clamped to the bounds).

        ``insert(i, value)`` adds one value, or the items of an Array;
        ``insert(i, n, value)`` adds ``n`` copies of ``value``.
        """
        index = max(0, min(index, len(self._items)))
        if len(args) == 1:
            (value,) = args
            values = list(value) if isinstance(value, Array) else [value]
        elif len(args) == 2:
            times, value = args
            values = [value] * max(times, 0)
        else:
            raise TypeError("insert takes a value, or a count and a value")
        self._items[index:index] = values

    def erase(self, start: int | None = None, end: int | None = None) -> None:
        """Clear everything, remove one index, or remove the range ``[start, end)``."""
        if start is None:
            self._items.clear()
            return
        bounds = self._slice_range(start, len(self._items) if end is None else end)
        if bounds is None:
            return
        first, last = bounds
        if end is None:
            del self._items[first]
        else:
            del self._items[first:last + 1]

    def join(self, sep: str = ", ") -> str:
        return sep.join(str(item) for item in self._items)

    def slice(self, start: int, end: int | None = None) -> "Array[T]":
        bounds = self._slice_range(start, len(self._items) if end is None else end)
        if bounds is None:
            return Array()
        first, last = bounds
        return Array(self._items[first:last + 1])

    def splice(self, start: int, count: int, *args: T) -> "Array[T]":
        """Remove ``count`` items from ``start``, insert ``args`` there, return the removed ones."""
        bounds = self._splice_range(start, count)
        if bounds is None:
            return Array()
        first, last = bounds
        removed = self._items[first:last + 1]
        self._items[first:last + 1] = list(args)
        return Array(removed)

    # -- range helpers --------------------------------------------------

    def _slice_range(self, x: int, y: int) -> tuple[int, int] | None:
        size = len(self._items)
        if size == 0 or x == y:
            return None
        last = size - 1
        if y > 0:
            y -= 1
        if x < 0:
            x += size
        if x < 0 or x > last:
            return None
        if y < 0:
            y += last
        if y > last:
            y = last
        if y < x:
            return None
        return x, y

    def _splice_range(self, x: int, count: int) -> tuple[int, int] | None:
        size = len(self._items)
        if size == 0 or count == 0:
            return None
        last = size - 1
        if x < 0:
            x += last
        if x < 0 or x > last:
            return None
        y = last if count < 0 else min(x + count - 1, last)
        if y < x:
            return None
        return x, y


def split_on(text: str, ch: str) -> Array[str]:
    """Split on a single character, skipping separators that start a piece."""
    if len(ch) != 1:
        raise ValueError("separator must be a single character")
    result: Array[str] = Array()
    rest = text
    while rest:
        rest = rest.lstrip(ch)
        index = rest.find(ch)
        if index == -1:
            result.push(rest)
            break
        result.push(rest[:index])
        rest = rest[index:]
    return result


def split_every(text: str, size: int) -> Array[str]:
    """Cut ``text`` into pieces of ``size`` characters; the last may be shorter."""
    if not text:
        return Array()
    width = len(text) if size < 0 else min(max(size, 1), len(text))
    return Array(text[i:i + width] for i in range(0, len(text), width))