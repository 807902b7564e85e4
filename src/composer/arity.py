"""Resolve how many positional arguments a callable waits for."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, Final

from composer.exceptions import ArityError

POSITIONAL: Final = frozenset(
    {inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD}
)


def function_name(func: Callable[..., Any]) -> str:
    """Best effort readable name of a callable."""
    for attribute in ("__qualname__", "__name__"):
        if name := getattr(func, attribute, None):
            return name
    return repr(func)


def signature_of(func: Callable[..., Any]) -> inspect.Signature | None:
    """Return the signature of `func`, or None when it cannot be inspected."""
    try:
        return inspect.signature(func)
    except (TypeError, ValueError):
        return None


def resolve_arity(func: Callable[..., Any], arity: int | None = None) -> int:
    """
    Determine the number of positional arguments `func` needs before it runs.

    The count mirrors a JavaScript ``fn.length``: required positional parameters
    up to the first one carrying a default. Keyword-only parameters are ignored.

    :param func: The callable to inspect.
    :param arity: Explicit arity. When given it is validated and returned as is.
    :returns: The number of positional arguments to wait for.
    :raises ArityError: If the arity is invalid or cannot be determined.
    """
    if arity is not None:
        if isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
            raise ArityError(f"Arity must be a non-negative integer, got {arity!r}")
        return arity

    if (signature := signature_of(func)) is None:
        raise ArityError(
            f"Cannot determine the arity of {function_name(func)}; "
            "pass an explicit arity"
        )

    return count_arity(signature, function_name(func))


def count_arity(signature: inspect.Signature, name: str) -> int:
    """Count the required positional parameters of `signature`.

    :raises ArityError: If the signature accepts `*args` before its first default.
    """
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            raise ArityError(f"{name} is variadic; pass an explicit arity")
        if parameter.kind in POSITIONAL and parameter.default is parameter.empty:
            count += 1
        elif parameter.kind in POSITIONAL:
            break
    return count
