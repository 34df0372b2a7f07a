"""Contract implemented by every value combination strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Sequence

__all__ = ["ValueReducerOrMapping"]


class ValueReducerOrMapping(ABC):
    """Combine values collected at one timestamp or rewrite a whole series.

    Implementations are stateless: the engine shares a single instance across
    every call and passes values in input-series order without assuming the
    combination is commutative.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable identifier, also used as the scope of reduced results."""

    @abstractmethod
    def reduce(self, values: Sequence[str]) -> str:
        """Combine the raw ``values`` collected at a single timestamp."""

    @abstractmethod
    def map_values(
        self, datapoints: Mapping[int, str], constants: Sequence[str]
    ) -> dict[int, str]:
        """Rewrite every value of ``datapoints`` using ``constants``.

        The returned mapping is new; ``datapoints`` must not be modified.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
