"""
Point-free function composition.

Derived functions are built from smaller ones without naming their arguments::

    from composer import pipe, curry, unary
    from combinators import last, prop, sort_by

    fastest_car = pipe(sort_by(prop("horsepower")), last, prop("name"))
    fastest_car(cars)  # name of the car with the most horsepower

All primitives are pure: pipelines and curried functions hold no mutable state
and can be called any number of times. Exceptions raised by the wrapped
functions reach the caller unchanged; use `composer.railway` to keep them on a
failure track instead.
"""

from composer.adapters import guard_input, n_ary, unary
from composer.composition import Pipeline, compose, pipe
from composer.currying import Curried, __, curry
from composer.exceptions import (
    ArityError,
    ComposerError,
    PipelineError,
    TypeMismatchError,
)
from composer.railway import run_pipeline, safe_pipe

__all__ = [
    # Composition
    "Pipeline",
    "compose",
    "pipe",
    # Currying
    "Curried",
    "__",
    "curry",
    # Adapters
    "guard_input",
    "n_ary",
    "unary",
    # Railway
    "run_pipeline",
    "safe_pipe",
    # Exceptions
    "ArityError",
    "ComposerError",
    "PipelineError",
    "TypeMismatchError",
]
