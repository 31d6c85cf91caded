"""Shared test fixtures."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest


@pytest.fixture()
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write TOML text to a config file under tmp_path and return its path."""

    def _write(text: str, name: str = "dot-steward.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, "utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("DOT_STEWARD_CONFIG", "DOT_STEWARD_SHELL", "DOT_STEWARD_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    yield
    package_logger = logging.getLogger("dot_steward")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
