"""Derive the shared identity of a group of series before they are merged."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Sequence, TypeVar

from tsreduce_core.series import Series

__all__ = ["DistilledMetadata", "MetricDistiller", "distill"]

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class DistilledMetadata:
    """Metadata every input series agrees on."""

    metric: str | None = None
    display_name: str | None = None
    units: str | None = None
    tags: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    def __hash__(self) -> int:
        return hash(
            (self.metric, self.display_name, self.units, frozenset(self.tags.items()))
        )


def _agreed(values: Sequence[_T]) -> _T | None:
    if not values:
        return None
    first = values[0]
    for value in values[1:]:
        if value != first:
            return None
    return first


def _common_tags(series: Sequence[Series]) -> dict[str, str]:
    if not series:
        return {}
    common = dict(series[0].tags)
    for item in series[1:]:
        common = {
            key: value
            for key, value in common.items()
            if item.tags.get(key) == value
        }
        if not common:
            break
    return common


def distill(series: Sequence[Series]) -> DistilledMetadata:
    """Return the metadata shared by every entry of ``series``.

    Each field survives only when all inputs carry the same value; otherwise
    it is cleared. Tags are intersected key by key, so a key missing from any
    input or holding divergent values is dropped.
    """

    return DistilledMetadata(
        metric=_agreed([item.metric for item in series]),
        display_name=_agreed([item.display_name for item in series]),
        units=_agreed([item.units for item in series]),
        tags=_common_tags(series),
    )


class MetricDistiller:
    """Stateful wrapper around :func:`distill` exposing the last result."""

    def __init__(self) -> None:
        self._result = DistilledMetadata()

    def distill(self, series: Sequence[Series]) -> DistilledMetadata:
        self._result = distill(series)
        return self._result

    @property
    def result(self) -> DistilledMetadata:
        return self._result

    @property
    def metric(self) -> str | None:
        return self._result.metric

    @property
    def display_name(self) -> str | None:
        return self._result.display_name

    @property
    def units(self) -> str | None:
        return self._result.units

    @property
    def tags(self) -> dict[str, str]:
        return dict(self._result.tags)
