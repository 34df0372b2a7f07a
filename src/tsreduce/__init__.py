"""Top-level package for tsreduce.

This package exposes the transforms that combine several time series into
one, or rewrite each series with a constant, together with the registry that
resolves transform names such as ``DIFF`` or ``SUM``.
"""

from ._version import __version__
from tsreduce_core import (
    DEFAULT_METRIC_NAME,
    DistilledMetadata,
    InvalidArgumentError,
    ReducerOrMappingTransform,
    Series,
    TransformError,
    UnknownTransformError,
    UnsupportedOperationError,
    ValueReducerOrMapping,
    distill,
)
from .registry import (
    available_transforms,
    build_transform,
    get_strategy,
    register_strategy,
)

__all__ = [
    "__version__",
    "DEFAULT_METRIC_NAME",
    "DistilledMetadata",
    "InvalidArgumentError",
    "ReducerOrMappingTransform",
    "Series",
    "TransformError",
    "UnknownTransformError",
    "UnsupportedOperationError",
    "ValueReducerOrMapping",
    "distill",
    "available_transforms",
    "build_transform",
    "get_strategy",
    "register_strategy",
]
