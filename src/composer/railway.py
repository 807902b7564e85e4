"""
Railway-oriented pipelines.

`pipe` lets exceptions escape the moment a stage raises. The helpers here run
the same kind of pipeline on the ``returns`` containers instead: each stage is
wrapped with ``safe`` and chained with ``bind``, so a failing stage switches the
pipeline to the failure track and the remaining stages are skipped.
"""

from collections.abc import Callable
from typing import Any

from returns.interfaces.container import ContainerN
from returns.pipeline import flow
from returns.pointfree import bind
from returns.result import Failure, ResultE, Success, safe

from composer.arity import function_name
from composer.composition import pipe
from composer.exceptions import ArityError, PipelineError
from utils.logger import log_railway_function


def _as_railway_stage(func: Callable[[Any], Any]) -> Callable[[Any], ResultE[Any]]:
    """Wrap a plain stage so it returns a `ResultE` instead of raising."""

    def stage(value: Any) -> ResultE[Any]:
        match result := safe(func)(value):
            case Success(ContainerN() as container):
                return container
        return result

    stage.__name__ = function_name(func)
    return stage


def safe_pipe(*functions: Callable[[Any], Any]) -> Callable[[Any], ResultE[Any]]:
    """
    Compose functions from left to right on the success track.

    Stages may return plain values or ``Result`` containers. The first exception
    raised ends up in a ``Failure`` and the following stages are not called.

    :param functions: Single-argument functions in execution order.
    :returns: A function taking one value and returning a ``ResultE``.
    :raises ArityError: If no function is given.
    """
    if not functions:
        raise ArityError("A railway pipeline needs at least one function")
    first, *rest = (_as_railway_stage(func) for func in functions)
    return pipe(first, *(bind(stage) for stage in rest))


@log_railway_function("Pipeline failed", "Pipeline succeeded")
def _pipeline_flow(entry_value: Any, *functions: Callable[[Any], Any]) -> ResultE[Any]:
    if isinstance(entry_value, ContainerN):
        return flow(entry_value, bind(safe_pipe(*functions)))
    return safe_pipe(*functions)(entry_value)


def run_pipeline(entry_value: Any, *functions: Callable[[Any], Any], error_message: str) -> Any:
    """
    Execute a series of functions on the success track and return the final value.

    :param entry_value: The initial value, either a raw value or a ``Result``
        container from the ``returns`` library.
    :param functions: Single-argument functions executed in order.
    :param error_message: Message of the `PipelineError` raised on failure.
    :returns: The unwrapped success value.
    :raises PipelineError: If any stage fails or the entry container is a failure.
    """
    match _pipeline_flow(entry_value, *functions):
        case Success(value):
            return value
        case Failure(error) if isinstance(error, BaseException):
            raise PipelineError(error_message) from error
        case _:
            raise PipelineError(error_message)
