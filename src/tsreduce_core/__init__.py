"""Core computation utilities for reducing and mapping time series."""

from __future__ import annotations

from tsreduce_core.distiller import DistilledMetadata, MetricDistiller, distill
from tsreduce_core.engine import DEFAULT_METRIC_NAME, ReducerOrMappingTransform
from tsreduce_core.errors import (
    InvalidArgumentError,
    TransformError,
    UnknownTransformError,
    UnsupportedOperationError,
)
from tsreduce_core.series import Series
from tsreduce_core.strategies import (
    DiffValueReducerOrMapping,
    DivideValueReducerOrMapping,
    NumericReducerOrMapping,
    ScaleValueReducerOrMapping,
    SumValueReducerOrMapping,
)
from tsreduce_core.strategy import ValueReducerOrMapping

__all__ = [
    "DEFAULT_METRIC_NAME",
    "DistilledMetadata",
    "MetricDistiller",
    "distill",
    "ReducerOrMappingTransform",
    "TransformError",
    "InvalidArgumentError",
    "UnsupportedOperationError",
    "UnknownTransformError",
    "Series",
    "ValueReducerOrMapping",
    "NumericReducerOrMapping",
    "DiffValueReducerOrMapping",
    "DivideValueReducerOrMapping",
    "ScaleValueReducerOrMapping",
    "SumValueReducerOrMapping",
]
