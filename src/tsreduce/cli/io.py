"""Series and configuration helpers for the tsreduce CLI."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from tsreduce.cli.errors import CliError
from tsreduce.configuration import load_project_config
from tsreduce_core.errors import InvalidArgumentError
from tsreduce_core.series import Series

__all__ = ["CONFIG_ENV_VAR", "load_cli_config", "load_series", "dump_series"]

CONFIG_ENV_VAR = "TSREDUCE_CONFIG"
STDIO_MARKER = "-"


def load_cli_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load CLI defaults from ``pyproject.toml`` files.

    An explicit ``path`` wins, then the ``TSREDUCE_CONFIG`` environment
    variable, then ``pyproject.toml`` in the working directory.
    """

    env_config = os.environ.get(CONFIG_ENV_VAR)
    candidates: List[Path] = []
    if path is not None:
        candidates.append(Path(path))
    if env_config:
        candidates.append(Path(env_config))
    candidates.append(Path.cwd())

    for candidate in candidates:
        loaded = load_project_config(candidate)
        if not loaded:
            continue
        payload, resolved = loaded
        payload["_config_path"] = str(resolved)
        return payload

    return {"_config_path": None}


def _read_text(source: str | Path) -> str:
    if str(source) == STDIO_MARKER:
        return sys.stdin.read()
    path = Path(source).expanduser()
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CliError(
            f"Input file '{path}' does not exist.",
            category="not_found",
            context={"path": str(path)},
        ) from exc
    except OSError as exc:
        raise CliError(
            f"Unable to read '{path}': {exc}",
            category="io",
            context={"path": str(path)},
        ) from exc


def load_series(source: str | Path) -> List[Series]:
    """Parse a JSON array of series objects from ``source`` (``-`` for stdin)."""

    text = _read_text(source)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CliError(
            f"Input is not valid JSON: {exc.msg} (line {exc.lineno}).",
            category="usage",
            context={"source": str(source)},
        ) from exc

    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list):
        raise CliError(
            "Input must be a JSON array of series objects.",
            category="usage",
            context={"source": str(source)},
        )

    series: List[Series] = []
    for index, entry in enumerate(payload):
        try:
            series.append(Series.from_mapping(entry))
        except InvalidArgumentError as exc:
            raise CliError(
                f"Series #{index} is invalid: {exc}",
                category="usage",
                context={"source": str(source), "index": index},
            ) from exc
    return series


def dump_series(series: Sequence[Series], destination: Optional[str | Path] = None) -> str:
    """Render ``series`` as JSON and write it to ``destination`` when given."""

    rendered = json.dumps([item.as_dict() for item in series], indent=2)
    if destination is None or str(destination) == STDIO_MARKER:
        return rendered
    path = Path(destination).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rendered + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(
            f"Unable to write '{path}': {exc}",
            category="io",
            context={"path": str(path)},
        ) from exc
    return ""
