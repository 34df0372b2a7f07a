"""Logging utilities for tsreduce."""

from tsreduce.logging.config import JsonFormatter, setup_logging

__all__ = ["JsonFormatter", "setup_logging"]
