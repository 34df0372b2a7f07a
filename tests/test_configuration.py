from __future__ import annotations

from pathlib import Path
from textwrap import dedent

from tsreduce.configuration import load_project_config, transform_settings


def write_pyproject(directory: Path, contents: str) -> Path:
    """Persist a ``pyproject.toml`` under ``directory`` and return its path."""

    target = directory / "pyproject.toml"
    target.write_text(dedent(contents).lstrip(), encoding="utf8")
    return target


def test_load_project_config_reads_tool_section(tmp_path: Path) -> None:
    pyproject = write_pyproject(
        tmp_path,
        """
        [tool.tsreduce.logging]
        level = "debug"

        [tool.tsreduce.transforms]
        default_metric_name = "combined"
        aliases = { minus = "DIFF" }
        """,
    )

    loaded = load_project_config(tmp_path)

    assert loaded is not None
    config, source = loaded
    assert source == pyproject.resolve()
    assert config["logging"] == {"level": "debug"}
    assert transform_settings(config) == {
        "default_metric_name": "combined",
        "aliases": {"minus": "DIFF"},
    }


def test_load_project_config_without_section(tmp_path: Path) -> None:
    write_pyproject(
        tmp_path,
        """
        [project]
        name = "demo"
        """,
    )

    assert load_project_config(tmp_path) is None


def test_load_project_config_missing_file(tmp_path: Path) -> None:
    assert load_project_config(tmp_path) is None
    assert load_project_config(tmp_path / "settings.json") is None


def test_transform_settings_ignores_invalid_entries() -> None:
    assert transform_settings(None) == {}
    assert transform_settings({"transforms": "nope"}) == {}
    assert transform_settings({"transforms": {"default_metric_name": "  "}}) == {}


def test_transform_settings_resolves_config_against_pyproject(tmp_path: Path) -> None:
    config = {
        "transforms": {"config": "site/transforms.yaml"},
        "_config_path": str(tmp_path / "pyproject.toml"),
    }

    assert transform_settings(config) == {
        "config_path": tmp_path / "site" / "transforms.yaml"
    }


def test_transform_settings_keeps_absolute_config(tmp_path: Path) -> None:
    target = tmp_path / "transforms.yaml"
    config = {
        "transforms": {"config": str(target)},
        "_config_path": "/elsewhere/pyproject.toml",
    }

    assert transform_settings(config)["config_path"] == target
    assert transform_settings({"transforms": {"config": ""}}) == {}
