"""A value-or-error container."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class ExpectedError(Exception):
    """Raised when the wrong side of an Expected is read."""


class Expected(Generic[T, E]):
    """Holds either a value or an error, never both."""

    __slots__ = ("_has", "_data")

    def __init__(self, has: bool, data: Any) -> None:
        self._has = has
        self._data = data

    @classmethod
    def ok(cls, value: T) -> "Expected[T, E]":
        return cls(True, value)

    @classmethod
    def fail(cls, error: E) -> "Expected[T, E]":
        return cls(False, error)

    def has_value(self) -> bool:
        return self._has

    def value(self) -> T:
        if not self._has:
            raise ExpectedError("expected does not have a value")
        return self._data

    def error(self) -> E:
        if self._has:
            raise ExpectedError("expected does not have an error")
        return self._data

    def __repr__(self) -> str:
        kind = "ok" if self._has else "fail"
        return f"Expected.{kind}({self._data!r})"