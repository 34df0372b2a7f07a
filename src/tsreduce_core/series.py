"""Time series entity consumed and produced by the transforms."""

from __future__ import annotations

import re
from collections.abc import Mapping as ABCMapping
from dataclasses import dataclass, field
from typing import Any, Mapping

from tsreduce_core.errors import InvalidArgumentError

__all__ = ["Series", "Datapoints"]


Datapoints = dict[int, str]


def _require_identifier(value: Any, *, field_name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{field_name} must be a string")
    if not value.strip():
        raise InvalidArgumentError(f"{field_name} must not be empty")
    return value


def _coerce_tags(tags: Mapping[str, str] | None) -> dict[str, str]:
    if tags is None:
        return {}
    if not isinstance(tags, ABCMapping):
        raise InvalidArgumentError("tags must be a mapping")
    return {str(key): str(value) for key, value in tags.items()}


_INTEGRAL_PATTERN = re.compile(r"[+-]?\d+")


def _coerce_timestamp(timestamp: Any) -> int:
    if isinstance(timestamp, int) and not isinstance(timestamp, bool):
        return timestamp
    if isinstance(timestamp, str) and _INTEGRAL_PATTERN.fullmatch(timestamp.strip()):
        return int(timestamp)
    raise InvalidArgumentError(f"datapoint timestamp {timestamp!r} is not an integer")


def _coerce_value(timestamp: int, value: Any) -> str:
    # Numbers decoded from JSON are rendered back to their textual form.
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise InvalidArgumentError(
        f"datapoint value {value!r} at timestamp {timestamp} is not a string"
    )


def _coerce_datapoints(datapoints: Mapping[Any, Any] | None) -> Datapoints:
    if datapoints is None:
        return {}
    if not isinstance(datapoints, ABCMapping):
        raise InvalidArgumentError("datapoints must be a mapping")
    coerced: Datapoints = {}
    for timestamp, value in datapoints.items():
        key = _coerce_timestamp(timestamp)
        if key in coerced:
            raise InvalidArgumentError(f"duplicate datapoint timestamp {key}")
        coerced[key] = _coerce_value(key, value)
    return coerced


@dataclass(slots=True)
class Series:
    """A named, tagged mapping of epoch-millisecond timestamps to raw values.

    Values are kept as the strings supplied upstream so their textual form
    survives untouched until a strategy interprets them.
    """

    scope: str
    metric: str
    display_name: str | None = None
    units: str | None = None
    tags: dict[str, str] = field(default_factory=dict)
    datapoints: Datapoints = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.scope = _require_identifier(self.scope, field_name="scope")
        self.metric = _require_identifier(self.metric, field_name="metric")
        self.tags = _coerce_tags(self.tags)
        self.datapoints = _coerce_datapoints(self.datapoints)

    @property
    def identity(self) -> tuple[str, str]:
        return (self.scope, self.metric)

    def with_datapoints(self, datapoints: Mapping[int, str]) -> "Series":
        """Return a copy of the series carrying ``datapoints`` instead."""

        return Series(
            scope=self.scope,
            metric=self.metric,
            display_name=self.display_name,
            units=self.units,
            tags=dict(self.tags),
            datapoints=dict(datapoints),
        )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "Series":
        """Build a series from its JSON representation."""

        if not isinstance(payload, ABCMapping):
            raise InvalidArgumentError("series payload must be a mapping")
        try:
            scope = payload["scope"]
            metric = payload["metric"]
        except KeyError as exc:
            raise InvalidArgumentError(
                f"series payload is missing the {exc.args[0]!r} field"
            ) from exc
        return cls(
            scope=scope,
            metric=metric,
            display_name=payload.get("display_name"),
            units=payload.get("units"),
            tags=payload.get("tags"),
            datapoints=payload.get("datapoints"),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "scope": self.scope,
            "metric": self.metric,
            "display_name": self.display_name,
            "units": self.units,
            "tags": dict(sorted(self.tags.items())),
            "datapoints": {
                str(timestamp): value
                for timestamp, value in sorted(self.datapoints.items())
            },
        }
