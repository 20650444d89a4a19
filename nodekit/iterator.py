"""Helpers that apply a function across their positional arguments."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")


def map_each(func: Callable[[Any], Any], *args: Any) -> None:
    """Call ``func`` on each argument in order."""
    for arg in args:
        func(arg)


def count(func: Callable[[Any], bool], *args: Any) -> int:
    return sum(1 for arg in args if func(arg))


def reduce(func: Callable[[T, T], T], first: T, *args: T) -> T:
    acc = first
    for arg in args:
        acc = func(acc, arg)
    return acc


def every(func: Callable[[Any], bool], *args: Any) -> bool:
    """True when every argument passes; False when there are none."""
    return bool(args) and all(func(arg) for arg in args)


def some(func: Callable[[Any], bool], *args: Any) -> bool:
    return any(func(arg) for arg in args)


def none(func: Callable[[Any], bool], *args: Any) -> bool:
    """True when no argument passes; False when there are none."""
    return bool(args) and not any(func(arg) for arg in args)


def join(sep: str, *args: Any) -> str:
    """Join the string forms of the arguments with ``sep``."""
    return sep.join(str(arg) for arg in args)