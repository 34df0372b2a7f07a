"""Reduce a group of series into one, or map each series independently.

Whether a transform reduces or maps depends on the constants supplied by the
caller: without constants the inputs are collated by timestamp and combined
into a single series, with constants every series is rewritten on its own.
"""

from __future__ import annotations

import logging
from typing import Sequence

from tsreduce_core.distiller import MetricDistiller
from tsreduce_core.errors import UnsupportedOperationError, require_argument
from tsreduce_core.series import Series
from tsreduce_core.strategy import ValueReducerOrMapping

__all__ = ["DEFAULT_METRIC_NAME", "ReducerOrMappingTransform"]


DEFAULT_METRIC_NAME = "result"

logger = logging.getLogger(__name__)


def _require_series_items(series: Sequence[Series]) -> None:
    for index, item in enumerate(series):
        require_argument(
            isinstance(item, Series),
            f"Element #{index} is {type(item).__name__}, expected Series",
        )


class ReducerOrMappingTransform:
    """Apply a :class:`ValueReducerOrMapping` strategy to a list of series.

    Parameters
    ----------
    strategy:
        Value combination strategy shared by every call. Its ``name`` becomes
        the scope of reduced results.
    default_metric_name:
        Metric name assigned to a reduced series when the inputs disagree on
        their own name.
    """

    __slots__ = ("_strategy", "_default_scope", "_default_metric_name")

    def __init__(
        self,
        strategy: ValueReducerOrMapping,
        *,
        default_metric_name: str = DEFAULT_METRIC_NAME,
    ) -> None:
        require_argument(strategy is not None, "A value strategy is required")
        require_argument(
            isinstance(default_metric_name, str) and bool(default_metric_name.strip()),
            "default_metric_name must be a non-empty string",
        )
        self._strategy = strategy
        self._default_scope = strategy.name
        self._default_metric_name = default_metric_name

    @property
    def strategy(self) -> ValueReducerOrMapping:
        return self._strategy

    @property
    def result_scope(self) -> str:
        return self._default_scope

    @property
    def default_metric_name(self) -> str:
        return self._default_metric_name

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(strategy={self._strategy!r}, "
            f"default_metric_name={self._default_metric_name!r})"
        )

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------
    def transform(self, series: Sequence[Series]) -> Series:
        """Reduce ``series`` into a single series."""

        return self.reduce(series)

    def transform_with_constants(
        self, series: Sequence[Series], constants: Sequence[str] | None = None
    ) -> list[Series]:
        """Map ``series`` when ``constants`` are given, reduce them otherwise."""

        if not constants:
            return [self.reduce(series)]
        return self.map(series, constants)

    def transform_groups(self, *groups: Sequence[Series]) -> list[Series]:
        raise UnsupportedOperationError(
            f"{self._default_scope} transform operates on a single list of series, "
            "not on a list of lists"
        )

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------
    def map(self, series: Sequence[Series], constants: Sequence[str]) -> list[Series]:
        """Rewrite the datapoints of every series with the strategy mapping.

        The inputs are left untouched; each result is a new series sharing the
        identity and metadata of the input at the same position.
        """

        require_argument(series is not None, "Cannot transform empty metric/metrics")
        require_argument(constants is not None, "Mapping requires constants")
        _require_series_items(series)
        constants = list(constants)
        logger.debug(
            "Mapping %d series with %s",
            len(series),
            self._default_scope,
            extra={"event": "transform.map", "transform": self._default_scope},
        )
        return [
            item.with_datapoints(self._strategy.map_values(item.datapoints, constants))
            for item in series
        ]

    # ------------------------------------------------------------------
    # Reduction
    # ------------------------------------------------------------------
    def reduce(self, series: Sequence[Series]) -> Series:
        """Combine ``series`` timestamp by timestamp into one series.

        Only timestamps present in every input survive; the remaining values
        are handed to the strategy in input order.
        """

        require_argument(series is not None, "Cannot transform empty metric/metrics")
        require_argument(len(series) > 0, "Cannot reduce an empty list of metrics")
        _require_series_items(series)

        distiller = MetricDistiller()
        distiller.distill(series)

        collated = self._collate(series)
        reduced = self._combine(collated, len(series))

        logger.debug(
            "Reduced %d series with %s: kept %d of %d timestamps",
            len(series),
            self._default_scope,
            len(reduced),
            len(collated),
            extra={
                "event": "transform.reduce",
                "transform": self._default_scope,
                "series": len(series),
                "kept": len(reduced),
                "dropped": len(collated) - len(reduced),
            },
        )

        metric = distiller.metric if distiller.metric is not None else self._default_metric_name
        return Series(
            scope=self._default_scope,
            metric=metric,
            display_name=distiller.display_name,
            units=distiller.units,
            tags=distiller.tags,
            datapoints=reduced,
        )

    @staticmethod
    def _collate(series: Sequence[Series]) -> dict[int, list[str]]:
        collated: dict[int, list[str]] = {}
        for item in series:
            for timestamp, value in item.datapoints.items():
                collated.setdefault(timestamp, []).append(value)
        return collated

    def _combine(self, collated: dict[int, list[str]], expected: int) -> dict[int, str]:
        combined: dict[int, str] = {}
        for timestamp in sorted(collated):
            values = collated[timestamp]
            if len(values) < expected:
                continue
            combined[timestamp] = self._strategy.reduce(values)
        return combined
