from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


_PACKAGE_LOGGERS = ("tsreduce", "tsreduce_core")


@pytest.fixture(autouse=True)
def _reset_package_loggers() -> Iterator[None]:
    """Undo handlers installed by ``setup_logging`` so caplog keeps working."""

    yield
    for name in _PACKAGE_LOGGERS:
        target = logging.getLogger(name)
        for handler in list(target.handlers):
            target.removeHandler(handler)
            handler.close()
        target.setLevel(logging.NOTSET)
        target.propagate = True


@pytest.fixture()
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory without a config override."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TSREDUCE_CONFIG", raising=False)
    return tmp_path
