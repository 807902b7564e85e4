"""Exceptions raised by the composition primitives."""

from __future__ import annotations

from typing import Any


class ComposerError(Exception):
    """Base class for all errors raised by the composer package."""


class ArityError(ComposerError, TypeError):
    """Raised when a primitive receives an invalid shape of functions or arguments."""


class TypeMismatchError(ComposerError, TypeError):
    """Raised when a stage receives a value it was not written for.

    :param stage: Name of the function that rejected the value
    :param expected: The type (or tuple of types) the stage accepts
    :param received: The offending value
    """

    def __init__(
        self, stage: str, expected: type | tuple[type, ...], received: Any
    ) -> None:
        self.stage = stage
        self.expected = expected
        self.received = received
        names = (
            " | ".join(t.__name__ for t in expected)
            if isinstance(expected, tuple)
            else expected.__name__
        )
        super().__init__(
            f"'{stage}' expected {names}, received {type(received).__name__}: "
            f"{received!r}"
        )


class PipelineError(ComposerError):
    """Raised when a railway pipeline ends on the failure track."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
