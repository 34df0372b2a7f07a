"""Command line application entry point for tsreduce."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from ..logging.config import setup_logging
from .errors import CliError
from .io import load_cli_config
from .parser import build_parser


def run_cli(args: Optional[Sequence[str]] = None) -> str:
    """Execute the tsreduce command line interface."""

    config_parser = argparse.ArgumentParser(add_help=False)
    config_parser.add_argument("--config", dest="config_path", type=Path, default=None)
    preliminary, _ = config_parser.parse_known_args(args)

    config = load_cli_config(preliminary.config_path)
    parser = build_parser(config)
    namespace = parser.parse_args(args)
    setup_logging(namespace.log_level, namespace.log_output, namespace.log_format)

    try:
        result = namespace.handler(namespace, config=config)
    except CliError as exc:
        exc.log()
        sys.stderr.write(exc.message)
        if not exc.message.endswith("\n"):
            sys.stderr.write("\n")
        raise SystemExit(exc.status_code) from exc

    if result:
        sys.stdout.write(result)
        if not result.endswith("\n"):
            sys.stdout.write("\n")
    return result


def main() -> None:  # pragma: no cover - thin wrapper
    run_cli()


if __name__ == "__main__":  # pragma: no cover - CLI invocation guard
    main()
