"""Pass-through stages for looking inside a pipeline."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from composer import curry
from utils.logger import log_value


def trace[T](value: T) -> T:
    """Log `value` at the configured trace level and return it unchanged.

    Example::

        fastest_car = pipe(sort_by(prop("horsepower")), trace, last, prop("name"))
    """
    log_value(type(value).__name__, value)
    return value


@curry
def tap[T](func: Callable[[T], Any], value: T) -> T:
    """Call `func` for its side effect and return `value` unchanged."""
    func(value)
    return value
