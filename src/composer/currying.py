"""
Currying with explicit or introspected arity.

A curried function collects positional arguments over any number of calls and
runs the wrapped function once enough of them are available::

    add3 = curry(lambda a, b, c: a + b + c)
    add3(1)(2)(3) == add3(1, 2)(3) == add3(1)(2, 3) == add3(1, 2, 3) == 6

The placeholder ``__`` keeps a slot open for a later call::

    is_adult = curry(operator.ge)(__, 18)
    is_adult(21)  # True
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from functools import update_wrapper
from typing import Any, Final, overload

from composer.arity import (
    POSITIONAL,
    count_arity,
    function_name,
    resolve_arity,
    signature_of,
)


class _Placeholder:
    """Sentinel marking an argument slot that a later call fills."""

    _instance: _Placeholder | None = None

    def __new__(cls) -> _Placeholder:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "__"

    def __reduce__(self) -> str:
        return "__"


__: Final = _Placeholder()


def _fill(received: tuple[Any, ...], supplied: tuple[Any, ...]) -> tuple[Any, ...]:
    """Fill open placeholder slots in order, then append the remaining arguments."""
    remaining = iter(supplied)
    combined = [next(remaining, __) if arg is __ else arg for arg in received]
    return (*combined, *remaining)


class Curried:
    """
    A function waiting for the rest of its positional arguments.

    Instances are immutable: every partial application returns a new `Curried`,
    so a partially applied function can be completed several times.

    :param func: The function to call once all arguments are available.
    :param arity: Number of positional arguments `func` needs.
    :param args: Positional arguments received so far (may contain ``__``).
    :param kwargs: Keyword arguments received so far; they do not count toward the arity.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        arity: int,
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
    ) -> None:
        update_wrapper(self, func)
        self._func = func
        self._arity = arity
        self._args = args
        self._kwargs = dict(kwargs or {})

    @property
    def arity(self) -> int:
        """Number of positional arguments still missing."""
        return max(0, self._arity - sum(arg is not __ for arg in self._args))

    @property
    def __signature__(self) -> inspect.Signature:
        """Signature of the wrapped function without the parameters already bound.

        Falls back to `arity` positional-only parameters when the remaining
        signature cannot be read or would report a different arity.
        """
        fallback = inspect.Signature(
            [
                inspect.Parameter(f"arg{index}", inspect.Parameter.POSITIONAL_ONLY)
                for index in range(self.arity)
            ]
        )
        if (signature := signature_of(self._func)) is None:
            return fallback

        parameters, position = [], 0
        for parameter in signature.parameters.values():
            if parameter.kind in POSITIONAL:
                bound = position < len(self._args) and self._args[position] is not __
                position += 1
                if bound:
                    continue
            if (
                parameter.name in self._kwargs
                and parameter.kind is not inspect.Parameter.VAR_KEYWORD
            ):
                continue
            parameters.append(parameter)

        if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in parameters):
            return fallback
        remaining = signature.replace(parameters=parameters)
        if count_arity(remaining, function_name(self._func)) != self.arity:
            return fallback
        return remaining

    @property
    def func(self) -> Callable[..., Any]:
        return self._func

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        received = _fill(self._args, args)
        merged = self._kwargs | kwargs
        if sum(arg is not __ for arg in received) >= self._arity:
            return self._func(*received, **merged)
        return Curried(self._func, self._arity, received, merged)

    def __repr__(self) -> str:
        arguments = ", ".join(
            [repr(arg) for arg in self._args]
            + [f"{key}={value!r}" for key, value in self._kwargs.items()]
        )
        return f"<curried {function_name(self._func)}({arguments}) awaiting {self.arity}>"


@overload
def curry(func: Callable[..., Any], arity: int | None = None) -> Curried: ...


@overload
def curry(
    func: None = None, arity: int | None = None
) -> Callable[[Callable[..., Any]], Curried]: ...


def curry(
    func: Callable[..., Any] | None = None, arity: int | None = None
) -> Curried | Callable[[Callable[..., Any]], Curried]:
    """
    Curry a function.

    Can be used as a function or as a decorator with or without arguments::

        add = curry(operator.add)
        parse = curry(int, arity=2)

        @curry
        def prop(key, obj): ...

        @curry(arity=2)
        def join(*parts): ...

    :param func: The function to curry.
    :param arity: Number of positional arguments to wait for. Defaults to the
        number of required positional parameters of `func`.
    :returns: A `Curried` wrapper, or a decorator when `func` is omitted.
    :raises ArityError: If the arity is invalid or cannot be determined, e.g. for
        variadic functions or builtins without a signature.
    """

    def decorator(function: Callable[..., Any]) -> Curried:
        if isinstance(function, Curried) and arity is None:
            return function
        return Curried(function, resolve_arity(function, arity))

    if func is not None:
        return decorator(func)
    return decorator
