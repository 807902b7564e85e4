"""Curried accessors and updaters for records (mappings or plain objects)."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from composer import curry


@curry
def prop(key: Hashable, obj: Any) -> Any:
    """Read `key` from a mapping, or the attribute `key` from any other object.

    A missing key or attribute yields None.
    """
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, str(key), None)


@curry
def pluck(key: Hashable, items: Iterable[Any]) -> list[Any]:
    """Read `key` from every item."""
    return [prop(key, item) for item in items]


@curry
def has(key: Hashable, obj: Any) -> bool:
    if isinstance(obj, Mapping):
        return key in obj
    return hasattr(obj, str(key))


@curry
def assoc(key: Hashable, value: Any, obj: Mapping[Hashable, Any]) -> dict[Hashable, Any]:
    """Return a copy of `obj` with `key` set to `value`."""
    return {**obj, key: value}


@curry
def adjust_prop(
    key: Hashable, func: Callable[[Any], Any], obj: Mapping[Hashable, Any]
) -> dict[Hashable, Any]:
    """
    Return a copy of `obj` with `func` applied to the value under `key`.

    The copy is returned unchanged when `key` is absent::

        increment_count = if_else(has("count"), adjust_prop("count", inc), assoc("count", 1))
        increment_count({})            # {"count": 1}
        increment_count({"count": 1})  # {"count": 2}
    """
    if key not in obj:
        return dict(obj)
    return {**obj, key: func(obj[key])}


@curry
def where(spec: Mapping[Hashable, Callable[[Any], bool]], obj: Any) -> bool:
    """Check that every predicate in `spec` holds for the matching property of `obj`.

    A property missing from `obj` fails its check without calling the predicate.
    """
    return all(
        has(key, obj) and predicate(prop(key, obj)) for key, predicate in spec.items()
    )


@curry
def prop_satisfies(predicate: Callable[[Any], bool], key: Hashable, obj: Any) -> bool:
    return bool(predicate(prop(key, obj)))
