"""Configuration loaders for the transform core."""

from tsreduce_core.config.loader import load_transform_config, resolve_aliases

__all__ = ["load_transform_config", "resolve_aliases"]
