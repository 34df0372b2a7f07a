"""Exception hierarchy shared by the transform engine and its strategies."""

from __future__ import annotations

__all__ = [
    "TransformError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "UnknownTransformError",
    "require_argument",
]


class TransformError(Exception):
    """Base class for every failure raised while transforming series."""


class InvalidArgumentError(TransformError, ValueError):
    """Raised when a required argument is missing or malformed."""


class UnsupportedOperationError(TransformError, NotImplementedError):
    """Raised when a transform is invoked through an entry point it rejects."""


class UnknownTransformError(TransformError, LookupError):
    """Raised when a transform name cannot be resolved to a strategy."""


def require_argument(condition: bool, message: str) -> None:
    """Raise :class:`InvalidArgumentError` with ``message`` unless ``condition`` holds."""

    if not condition:
        raise InvalidArgumentError(message)
