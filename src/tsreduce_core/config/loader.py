"""Load transform defaults from YAML with packaged fallbacks."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

__all__ = ["load_transform_config", "resolve_aliases"]


_TRANSFORM_RESOURCE_PACKAGE = "tsreduce.resources.config"
_TRANSFORM_RESOURCE_NAME = "transforms.yaml"


def load_transform_config(path: str | Path | None = None) -> Mapping[str, Any]:
    """Load the transform defaults, optionally overridden by ``path``.

    Parameters
    ----------
    path:
        Absolute or relative path to a YAML file. Its keys are merged over
        the defaults bundled with :mod:`tsreduce`, so an override only needs
        to list the keys it changes.
    """

    defaults = _load_packaged_defaults()

    if path is None:
        return defaults

    candidate = Path(path).expanduser()
    if not candidate.is_file():
        raise FileNotFoundError(candidate)
    return _merge_over_defaults(defaults, _load_transform_payload(candidate))


def resolve_aliases(config: Mapping[str, Any]) -> dict[str, str]:
    """Return the alias table of ``config`` with upper-cased names."""

    aliases = config.get("aliases")
    if not isinstance(aliases, MappingABC):
        return {}
    return {str(alias).upper(): str(target).upper() for alias, target in aliases.items()}


def _load_packaged_defaults() -> Mapping[str, Any]:
    resource = resources.files(_TRANSFORM_RESOURCE_PACKAGE).joinpath(
        _TRANSFORM_RESOURCE_NAME
    )
    payload = resource.read_text(encoding="utf-8")
    return _load_transform_from_text(payload, source=str(resource))


def _merge_over_defaults(
    defaults: Mapping[str, Any], overrides: Mapping[str, Any]
) -> Mapping[str, Any]:
    merged = _deep_copy_mapping(defaults)
    _deep_merge(merged, overrides)
    return MappingProxyType(merged)


def _deep_merge(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        key_str = str(key)
        existing = target.get(key_str)
        if isinstance(existing, MappingABC) and isinstance(value, MappingABC):
            merged = dict(existing)
            _deep_merge(merged, value)
            target[key_str] = merged
        elif isinstance(value, MappingABC):
            target[key_str] = _deep_copy_mapping(value)
        else:
            target[key_str] = value


def _deep_copy_mapping(source: Mapping[str, Any]) -> dict[str, Any]:
    copied: dict[str, Any] = {}
    for key, value in source.items():
        key_str = str(key)
        if isinstance(value, MappingABC):
            copied[key_str] = _deep_copy_mapping(value)
        else:
            copied[key_str] = value
    return copied


def _load_transform_payload(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as buffer:
        payload = buffer.read()
    return _load_transform_from_text(payload, source=str(path))


def _load_transform_from_text(payload: str, *, source: str) -> Mapping[str, Any]:
    try:
        data = yaml.safe_load(payload)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in transform configuration: {source}") from exc

    if data is None:
        return MappingProxyType({})
    if not isinstance(data, MappingABC):
        raise TypeError(
            f"Transform configuration in {source!s} must decode to a mapping"
        )
    return MappingProxyType(_deep_copy_mapping(data))
