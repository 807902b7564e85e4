"""Curried list transforms."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from composer import curry


@curry
def sort_by[T](key: Callable[[T], Any], items: Iterable[T]) -> list[T]:
    """Return a new list sorted by `key`; equal keys keep their order."""
    return sorted(items, key=key)


@curry
def head[T](items: Sequence[T]) -> T | None:
    return items[0] if items else None


@curry
def last[T](items: Sequence[T]) -> T | None:
    return items[-1] if items else None


@curry
def keep[T](predicate: Callable[[T], Any], items: Iterable[T]) -> list[T]:
    """Keep the items for which `predicate` holds."""
    return [item for item in items if predicate(item)]


@curry
def reject[T](predicate: Callable[[T], Any], items: Iterable[T]) -> list[T]:
    """Drop the items for which `predicate` holds."""
    return [item for item in items if not predicate(item)]


@curry
def map_indexed[T, R](
    func: Callable[[T, int, Sequence[T]], R], items: Sequence[T]
) -> list[R]:
    """
    Map `func` over `items`, calling it as ``func(value, index, items)``.

    This is how array iteration callbacks are usually invoked, and why handing it
    a function with optional positional parameters can go wrong::

        map_indexed(parse_int, ["1", "12", "123"])         # [1, nan, 1]
        map_indexed(unary(parse_int), ["1", "12", "123"])  # [1, 12, 123]
    """
    return [func(value, index, items) for index, value in enumerate(items)]


@curry
def total(items: Iterable[Any]) -> Any:
    return sum(items)
