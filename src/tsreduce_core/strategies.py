"""Numeric value strategies: difference, division, scaling and sum."""

from __future__ import annotations

from typing import Mapping, Sequence

import numpy as np

from tsreduce_core.errors import InvalidArgumentError, require_argument
from tsreduce_core.strategy import ValueReducerOrMapping

__all__ = [
    "NumericReducerOrMapping",
    "DiffValueReducerOrMapping",
    "DivideValueReducerOrMapping",
    "ScaleValueReducerOrMapping",
    "SumValueReducerOrMapping",
]


def _parse_values(values: Sequence[str]) -> np.ndarray:
    parsed = np.empty(len(values), dtype=np.float64)
    for index, value in enumerate(values):
        if value is None:
            raise InvalidArgumentError("Datapoint values must not be null")
        try:
            parsed[index] = float(value)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Datapoint value {value!r} is not numeric"
            ) from exc
    return parsed


def _format_value(value: float) -> str:
    return repr(float(value))


class NumericReducerOrMapping(ValueReducerOrMapping):
    """Shared parsing and rendering for strategies backed by a numpy ufunc.

    Subclasses pick the binary ``ufunc``; reductions fold it from the left over
    the values in input order and mappings apply it against a single constant.
    """

    ufunc: np.ufunc

    def reduce(self, values: Sequence[str]) -> str:
        require_argument(bool(values), f"{self.name} transform needs at least one value")
        parsed = _parse_values(values)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            result = self.ufunc.reduce(parsed)
        return _format_value(result)

    def map_values(
        self, datapoints: Mapping[int, str], constants: Sequence[str]
    ) -> dict[int, str]:
        constant = self._parse_constant(constants)
        timestamps = list(datapoints)
        parsed = _parse_values([datapoints[timestamp] for timestamp in timestamps])
        with np.errstate(over="ignore", invalid="ignore"):
            mapped = self.ufunc(parsed, constant)
        return {
            timestamp: _format_value(value)
            for timestamp, value in zip(timestamps, mapped.tolist())
        }

    def _parse_constant(self, constants: Sequence[str]) -> float:
        require_argument(
            constants is not None and len(constants) == 1,
            f"{self.name} transform requires exactly one constant when mapping",
        )
        try:
            return float(constants[0])
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f"Constant {constants[0]!r} for {self.name} transform is not numeric"
            ) from exc


class DiffValueReducerOrMapping(NumericReducerOrMapping):
    """Subtract later series from the first one, or a constant from every value."""

    ufunc = np.subtract

    @property
    def name(self) -> str:
        return "DIFF"


class DivideValueReducerOrMapping(NumericReducerOrMapping):
    """Divide the first series by the later ones, or every value by a constant."""

    ufunc = np.divide

    @property
    def name(self) -> str:
        return "DIVIDE"

    def _parse_constant(self, constants: Sequence[str]) -> float:
        constant = super()._parse_constant(constants)
        require_argument(constant != 0.0, "Datapoints cannot be divided by a zero constant")
        return constant


class ScaleValueReducerOrMapping(NumericReducerOrMapping):
    """Multiply values together, or every value by a constant."""

    ufunc = np.multiply

    @property
    def name(self) -> str:
        return "SCALE"


class SumValueReducerOrMapping(NumericReducerOrMapping):
    """Add values together, or a constant to every value."""

    ufunc = np.add

    @property
    def name(self) -> str:
        return "SUM"
