"""Command handlers backing the tsreduce subcommands."""

from __future__ import annotations

import argparse
import logging
from typing import Any, Mapping

from tsreduce.cli.errors import CliError
from tsreduce.cli.io import dump_series, load_series
from tsreduce.configuration import transform_settings
from tsreduce.registry import available_transforms, build_transform
from tsreduce_core.errors import TransformError

__all__ = ["handle_list", "handle_run"]

logger = logging.getLogger(__name__)


def handle_list(namespace: argparse.Namespace, *, config: Mapping[str, Any]) -> str:
    return "\n".join(available_transforms())


def handle_run(namespace: argparse.Namespace, *, config: Mapping[str, Any]) -> str:
    context = {"transform": namespace.transform, "input": namespace.input}
    settings = transform_settings(config)
    try:
        transform = build_transform(namespace.transform, **settings)
    except FileNotFoundError as exc:
        raise CliError(
            f"Transform config '{settings.get('config_path')}' does not exist.",
            category="not_found",
            context=context,
        ) from exc
    except TransformError as exc:
        raise CliError.from_transform_error(exc, context=context) from exc
    except (TypeError, ValueError) as exc:
        raise CliError(
            f"Transform config '{settings.get('config_path')}' is invalid: {exc}",
            category="usage",
            context=context,
        ) from exc

    series = load_series(namespace.input)
    try:
        results = transform.transform_with_constants(series, namespace.constants)
    except TransformError as exc:
        raise CliError.from_transform_error(exc, context=context) from exc

    logger.info(
        "Applied %s to %d series",
        transform.result_scope,
        len(series),
        extra={
            "event": "cli.run",
            "transform": transform.result_scope,
            "mode": "map" if namespace.constants else "reduce",
            "inputs": len(series),
            "outputs": len(results),
        },
    )
    return dump_series(results, namespace.output)
