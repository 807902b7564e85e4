"""Left-to-right and right-to-left function composition."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Self

from returns.pipeline import flow

from composer.arity import function_name, signature_of
from composer.exceptions import ArityError
from utils.logger import debug_function_signature


@dataclass(frozen=True, slots=True)
class Pipeline:
    """
    An immutable sequence of functions applied one after the other.

    The first function receives every argument the pipeline is called with;
    each following function receives exactly one argument, the previous result.

    :param functions: The stages, in execution order.
    """

    functions: tuple[Callable[..., Any], ...]

    def __post_init__(self) -> None:
        if not self.functions:
            raise ArityError("A pipeline needs at least one function")
        if culprits := ", ".join(
            repr(func) for func in self.functions if not callable(func)
        ):
            raise TypeError(f"Pipeline stages must be callable, got: {culprits}")

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        first, *rest = self.functions
        debug_function_signature(self, *args, **kwargs)
        return flow(first(*args, **kwargs), *rest)

    @property
    def __name__(self) -> str:
        return " | ".join(function_name(func) for func in self.functions)

    @property
    def __signature__(self) -> inspect.Signature:
        if (signature := signature_of(self.functions[0])) is None:
            raise ValueError(f"No signature found for {function_name(self.functions[0])}")
        return signature

    def then(self, *functions: Callable[..., Any]) -> Self:
        """Return a new pipeline running `functions` after the current stages."""
        return type(self)((*self.functions, *functions))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} of: {self.__name__}>"


def pipe(*functions: Callable[..., Any]) -> Pipeline:
    """
    Compose functions from left to right.

    ``pipe(f, g, h)(x) == h(g(f(x)))``

    Example::

        fastest_car_name = pipe(sort_by(prop("horsepower")), last, prop("name"))

    :param functions: Functions in execution order.
    :returns: A pipeline whose arity is the arity of the first function.
    :raises ArityError: If no function is given.
    :raises TypeError: If one of the stages is not callable.
    """
    return Pipeline(functions)


def compose(*functions: Callable[..., Any]) -> Pipeline:
    """
    Compose functions from right to left.

    ``compose(f, g, h)(x) == f(g(h(x)))``

    :param functions: Functions in mathematical order; the last one runs first.
    :returns: A pipeline whose arity is the arity of the last function.
    :raises ArityError: If no function is given.
    :raises TypeError: If one of the stages is not callable.
    """
    return Pipeline(functions[::-1])
