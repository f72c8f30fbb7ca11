"""Miscellaneous utilities."""

from __future__ import annotations

from typing import TypeVar

from collections.abc import Callable, Iterable

_T = TypeVar("_T")


def first(it: Iterable[_T]) -> _T | None:
    """Get the first element of an arbitrary iterable, or None."""
    return next(iter(it), None)


def first_where(it: Iterable[_T], predicate: Callable[[_T], bool]) -> _T | None:
    """Get the first element of an arbitrary iterable that satisfies the predicate, or None."""
    return first(el for el in it if predicate(el))


def plural(count: int, word: str) -> str:
    """Format a count with a naively pluralised word."""
    return f"{count} {word}" if count == 1 else f"{count} {word}s"
