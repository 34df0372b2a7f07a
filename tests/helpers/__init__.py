"""Convenience re-exports for test helpers."""

from __future__ import annotations

from tests.helpers.series import build_series, series_pair
from tests.helpers.strategies import (
    FirstMinusSecondStrategy,
    JoinStrategy,
    PassthroughStrategy,
)

__all__ = [
    "build_series",
    "series_pair",
    "FirstMinusSecondStrategy",
    "JoinStrategy",
    "PassthroughStrategy",
]
