"""Registry resolving transform names to value strategies."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Type

from tsreduce_core.config import load_transform_config, resolve_aliases
from tsreduce_core.engine import DEFAULT_METRIC_NAME, ReducerOrMappingTransform
from tsreduce_core.errors import UnknownTransformError
from tsreduce_core.strategies import (
    DiffValueReducerOrMapping,
    DivideValueReducerOrMapping,
    ScaleValueReducerOrMapping,
    SumValueReducerOrMapping,
)
from tsreduce_core.strategy import ValueReducerOrMapping

__all__ = [
    "available_transforms",
    "build_transform",
    "get_strategy",
    "register_strategy",
]

logger = logging.getLogger(__name__)

_STRATEGY_REGISTRY: Dict[str, ValueReducerOrMapping] = {}


@lru_cache(maxsize=1)
def _packaged_config() -> Mapping[str, Any]:
    return load_transform_config()


def _transform_config(config_path: str | Path | None) -> Mapping[str, Any]:
    if config_path is None:
        return _packaged_config()
    return load_transform_config(config_path)


def register_strategy(
    strategy_cls: Type[ValueReducerOrMapping],
) -> Type[ValueReducerOrMapping]:
    """Register ``strategy_cls`` under its upper-cased ``name``.

    Usable as a class decorator. Strategies are stateless, so a single
    instance is kept and shared by every transform built from the registry.
    """

    if not isinstance(strategy_cls, type) or not issubclass(
        strategy_cls, ValueReducerOrMapping
    ):
        raise TypeError("strategy_cls must be a ValueReducerOrMapping subclass")

    instance = strategy_cls()
    key = instance.name.upper()
    existing = _STRATEGY_REGISTRY.get(key)
    if existing is not None and type(existing) is not strategy_cls:
        raise ValueError(
            f"transform {key!r} already registered by {type(existing).__name__}"
        )
    _STRATEGY_REGISTRY[key] = instance
    return strategy_cls


def available_transforms() -> tuple[str, ...]:
    """Return the sorted names of every registered transform."""

    return tuple(sorted(_STRATEGY_REGISTRY))


def get_strategy(
    name: str,
    *,
    aliases: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> ValueReducerOrMapping:
    """Resolve ``name`` (case-insensitive, aliases honoured) to its strategy.

    Aliases come from the packaged ``transforms.yaml``, or from the YAML file
    at ``config_path`` merged over it, and then from ``aliases``.
    """

    return _lookup(name, aliases, _transform_config(config_path))


def _lookup(
    name: str, aliases: Mapping[str, str] | None, config: Mapping[str, Any]
) -> ValueReducerOrMapping:
    if not isinstance(name, str) or not name.strip():
        raise UnknownTransformError("transform name must be a non-empty string")
    key = name.strip().upper()
    alias_table = resolve_aliases(config)
    if aliases:
        alias_table.update(
            {str(alias).upper(): str(target).upper() for alias, target in aliases.items()}
        )
    key = alias_table.get(key, key)
    try:
        return _STRATEGY_REGISTRY[key]
    except KeyError as exc:
        raise UnknownTransformError(
            f"unknown transform {name!r}; available: {', '.join(available_transforms())}"
        ) from exc


def build_transform(
    name: str,
    *,
    default_metric_name: str | None = None,
    aliases: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> ReducerOrMappingTransform:
    """Create a transform engine bound to the strategy registered as ``name``."""

    config = _transform_config(config_path)
    strategy = _lookup(name, aliases, config)
    if default_metric_name is None:
        default_metric_name = str(
            config.get("default_metric_name", DEFAULT_METRIC_NAME)
        )
    logger.debug(
        "Building %s transform",
        strategy.name,
        extra={"event": "registry.build", "transform": strategy.name},
    )
    return ReducerOrMappingTransform(strategy, default_metric_name=default_metric_name)


for _strategy_cls in (
    DiffValueReducerOrMapping,
    DivideValueReducerOrMapping,
    ScaleValueReducerOrMapping,
    SumValueReducerOrMapping,
):
    register_strategy(_strategy_cls)
