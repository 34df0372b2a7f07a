"""Argument parsing helpers for the tsreduce CLI."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Mapping, Optional

from tsreduce.cli.workflows import handle_list, handle_run


def build_parser(config: Optional[Mapping[str, Any]] = None) -> argparse.ArgumentParser:
    config = dict(config or {})
    logging_cfg_raw = config.get("logging", {})
    logging_cfg = dict(logging_cfg_raw) if isinstance(logging_cfg_raw, Mapping) else {}

    parser = argparse.ArgumentParser(
        prog="tsreduce",
        description="Reduce several time series into one, or map each series with a constant.",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to the pyproject.toml holding a [tool.tsreduce] table.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=logging_cfg.get("level", "warning"),
        help="Logging level (e.g. debug, info, warning).",
    )
    parser.add_argument(
        "--log-output",
        dest="log_output",
        default=logging_cfg.get("output", "stderr"),
        help="Logging destination (stdout, stderr or a file path).",
    )
    parser.add_argument(
        "--log-format",
        dest="log_format",
        choices=("json", "text"),
        default=logging_cfg.get("format", "json"),
        help="Logging formatter (json or text).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser(
        "list",
        help="List the registered transform names.",
    )
    list_parser.set_defaults(handler=handle_list)

    run_parser = subparsers.add_parser(
        "run",
        help="Apply a transform to a JSON array of series.",
    )
    run_parser.add_argument(
        "transform",
        help="Transform name, e.g. DIFF, DIVIDE, SCALE or SUM (aliases accepted).",
    )
    run_parser.add_argument(
        "--input",
        dest="input",
        default="-",
        help="JSON file holding the input series ('-' reads stdin, the default).",
    )
    run_parser.add_argument(
        "--constant",
        dest="constants",
        action="append",
        default=[],
        metavar="VALUE",
        help="Constant applied to every series; switches the transform to mapping mode.",
    )
    run_parser.add_argument(
        "--output",
        dest="output",
        default=None,
        help="Write the resulting series to this file instead of stdout.",
    )
    run_parser.set_defaults(handler=handle_run)

    return parser


__all__ = ["build_parser"]
