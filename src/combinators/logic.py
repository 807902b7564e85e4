"""Curried comparisons, predicates and branching."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from composer import curry


@curry
def equals(a: Any, b: Any) -> bool:
    return a == b


@curry
def gt(a: Any, b: Any) -> bool:
    """``a > b``. Use the placeholder to fix the right operand: ``gt(__, 10)``."""
    return a > b


@curry
def lt(a: Any, b: Any) -> bool:
    """``a < b``. Use the placeholder to fix the right operand: ``lt(__, 20)``."""
    return a < b


@curry
def inc(value: Any) -> Any:
    return value + 1


def identity[T](value: T) -> T:
    return value


def always[T](value: T) -> Callable[..., T]:
    """Return a function that ignores its arguments and returns `value`."""

    def constant(*args: Any, **kwargs: Any) -> T:
        return value

    return constant


def complement(predicate: Callable[..., Any]) -> Callable[..., bool]:
    """Negate `predicate`."""

    def negated(*args: Any, **kwargs: Any) -> bool:
        return not predicate(*args, **kwargs)

    return negated


@curry
def if_else(
    condition: Callable[..., Any],
    on_true: Callable[..., Any],
    on_false: Callable[..., Any],
) -> Callable[..., Any]:
    """
    Build a function that calls `on_true` or `on_false` depending on `condition`.

    All three functions receive the arguments the built function is called with::

        should_code = if_else(
            where({"loves_tech": equals(True), "works_hard": equals(True)}),
            lambda person: f"{person['name']} may enjoy a tech career!",
            lambda person: f"{person['name']} wouldn't enjoy a tech career.",
        )
    """

    def branch(*args: Any, **kwargs: Any) -> Any:
        if condition(*args, **kwargs):
            return on_true(*args, **kwargs)
        return on_false(*args, **kwargs)

    return branch


@curry
def default_to(default: Any, value: Any) -> Any:
    """Return `default` when `value` is None or NaN, `value` otherwise."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return default
    return value
