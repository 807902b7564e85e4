"""Adapters that reshape how a function receives its arguments."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from composer.arity import function_name
from composer.exceptions import ArityError, TypeMismatchError


def n_ary[R](n: int, func: Callable[..., R]) -> Callable[..., R]:
    """
    Restrict `func` to its first `n` positional arguments.

    Extra positional and keyword arguments supplied by the caller are dropped.

    :param n: Number of positional arguments to forward.
    :param func: The function to wrap.
    :raises ArityError: If `n` is negative, or when the wrapper is called with
        fewer than `n` arguments.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ArityError(f"n_ary expects a non-negative integer, got {n!r}")

    @wraps(func)
    def restricted(*args: Any, **_: Any) -> R:
        if len(args) < n:
            raise ArityError(
                f"{function_name(func)} expects {n} argument(s), got {len(args)}"
            )
        return func(*args[:n])

    return restricted


def unary[T, R](func: Callable[[T], R]) -> Callable[..., R]:
    """
    Call `func` with only the first positional argument.

    Useful when a callback is handed extra arguments it would misread, for
    instance a parser taking the element index as its radix::

        map_indexed(unary(parse_int), ["1", "12", "123"])  # [1, 12, 123]
    """
    return n_ary(1, func)


def guard_input[T, R](
    expected: type[T] | tuple[type, ...], func: Callable[..., R]
) -> Callable[..., R]:
    """
    Reject a first argument that is not an instance of `expected`.

    :raises TypeMismatchError: When the first argument has the wrong type.
    """

    @wraps(func)
    def guarded(value: Any, *args: Any, **kwargs: Any) -> R:
        if not isinstance(value, expected):
            raise TypeMismatchError(function_name(func), expected, value)
        return func(value, *args, **kwargs)

    return guarded
