"""Errors raised by the tsreduce command line tool."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from tsreduce_core.errors import (
    InvalidArgumentError,
    TransformError,
    UnknownTransformError,
    UnsupportedOperationError,
)

__all__ = ["CliError", "EXIT_CODES"]

logger = logging.getLogger("tsreduce.cli")

#: Process exit status for each error category.
EXIT_CODES: Mapping[str, int] = {
    "runtime": 1,
    "usage": 2,
    "io": 3,
    "not_found": 4,
}


class CliError(RuntimeError):
    """Failure reported to the user with a category-specific exit status."""

    def __init__(
        self,
        message: str,
        *,
        category: str = "runtime",
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        if category not in EXIT_CODES:
            raise ValueError(f"unknown error category {category!r}")
        super().__init__(message)
        self.message = message
        self.category = category
        self.context = {key: str(value) for key, value in (context or {}).items()}
        self.logged = False

    @property
    def status_code(self) -> int:
        return EXIT_CODES[self.category]

    @classmethod
    def from_transform_error(
        cls, exc: TransformError, *, context: Optional[Mapping[str, Any]] = None
    ) -> "CliError":
        """Wrap ``exc`` so that bad input exits with a usage status."""

        if isinstance(exc, UnknownTransformError):
            category = "not_found"
        elif isinstance(exc, (InvalidArgumentError, UnsupportedOperationError)):
            category = "usage"
        else:
            category = "runtime"
        return cls(str(exc), category=category, context=context)

    def log(self) -> None:
        """Log the error once; repeated calls are ignored."""

        if self.logged:
            return
        logger.error(
            self.message,
            extra={
                "event": "cli.error",
                "category": self.category,
                "status_code": self.status_code,
                "context": self.context,
            },
            exc_info=self,
        )
        self.logged = True
