"""Command line utilities for tsreduce."""

from tsreduce.cli.app import main, run_cli

__all__ = ["main", "run_cli"]
