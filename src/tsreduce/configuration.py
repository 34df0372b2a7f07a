"""Helpers to load project-level configuration files."""

from __future__ import annotations

from collections.abc import Mapping as ABCMapping
from pathlib import Path
from typing import Any

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - Python < 3.11 fallback
    import tomli as tomllib  # type: ignore


_PROJECT_FILENAME = "pyproject.toml"
_TOOL_SECTION = "tsreduce"


def _as_dict(payload: ABCMapping[str, Any]) -> dict[str, Any]:
    """Recursively coerce TOML mappings into regular dictionaries."""

    result: dict[str, Any] = {}
    for key, value in payload.items():
        key_str = str(key)
        if isinstance(value, ABCMapping):
            result[key_str] = _as_dict(value)
        elif isinstance(value, list):
            result[key_str] = [
                _as_dict(item) if isinstance(item, ABCMapping) else item for item in value
            ]
        else:
            result[key_str] = value
    return result


def _resolve_pyproject_path(candidate: Path) -> Path | None:
    """Return the concrete ``pyproject.toml`` path for ``candidate`` if possible."""

    candidate = candidate.expanduser()
    if candidate.name == _PROJECT_FILENAME:
        return candidate
    if candidate.suffix:
        return None
    return candidate / _PROJECT_FILENAME


def _load_toml_mapping(path: Path) -> dict[str, Any] | None:
    if not path.exists():
        return None
    with path.open("rb") as handle:
        data = tomllib.load(handle)
    if isinstance(data, ABCMapping):
        return _as_dict(data)
    return None


def load_project_config(path: Path) -> tuple[dict[str, Any], Path] | None:
    """Load the ``[tool.tsreduce]`` section from ``pyproject.toml``."""

    pyproject_path = _resolve_pyproject_path(Path(path))
    if pyproject_path is None:
        return None

    pyproject_path = pyproject_path.expanduser().resolve(strict=False)
    pyproject_payload = _load_toml_mapping(pyproject_path)
    if not pyproject_payload:
        return None

    tool_section = pyproject_payload.get("tool")
    if not isinstance(tool_section, ABCMapping):
        return None

    section = tool_section.get(_TOOL_SECTION)
    if not isinstance(section, ABCMapping):
        return None

    return _as_dict(section), pyproject_path


def transform_settings(config: ABCMapping[str, Any] | None) -> dict[str, Any]:
    """Extract the keyword arguments for :func:`tsreduce.registry.build_transform`.

    A relative ``config`` entry is resolved against the directory of the
    ``pyproject.toml`` it was read from.
    """

    if not config:
        return {}
    section = config.get("transforms")
    if not isinstance(section, ABCMapping):
        return {}
    settings: dict[str, Any] = {}
    default_metric_name = section.get("default_metric_name")
    if isinstance(default_metric_name, str) and default_metric_name.strip():
        settings["default_metric_name"] = default_metric_name
    aliases = section.get("aliases")
    if isinstance(aliases, ABCMapping):
        settings["aliases"] = {str(key): str(value) for key, value in aliases.items()}
    override = section.get("config")
    if isinstance(override, str) and override.strip():
        override_path = Path(override).expanduser()
        source = config.get("_config_path")
        if not override_path.is_absolute() and source:
            override_path = Path(source).parent / override_path
        settings["config_path"] = override_path
    return settings


__all__ = [
    "load_project_config",
    "transform_settings",
]
