"""Shared pytest fixtures and test helpers for flipboard tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from flipboard.config.settings import FlipSettings
from flipboard.infrastructure.store import Store


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of settings and theme resolution."""
    monkeypatch.delenv("FLIPBOARD_CONFIG", raising=False)
    monkeypatch.delenv("COLORFGBG", raising=False)


@pytest.fixture(autouse=True)
def _restore_root_handlers() -> Iterator[None]:
    """Drop handlers the CLI bound to CliRunner streams once a test ends."""
    root = logging.getLogger()
    original = root.handlers[:]
    yield
    root.handlers = original


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Temporary data directory.

    Single source of truth for the on-disk layout; ``store`` and
    ``_isolated_data_dir`` both build on it.
    """
    return tmp_path


@pytest.fixture
def settings(data_dir: Path) -> FlipSettings:
    """Default settings rooted at the temp data directory."""
    return FlipSettings.from_cli(data_dir=data_dir)


@pytest.fixture
def store(settings: FlipSettings) -> Iterator[Store]:
    """Initialized store on a temp directory."""
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_data_dir(data_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp data directory so the CLI stores state there.

    Use via ``@pytest.mark.usefixtures("_isolated_data_dir")`` on command
    test classes.
    """
    monkeypatch.chdir(data_dir)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_store(data_dir: Path, **cli_flags: Any) -> Store:
    """Open a store for *data_dir* with custom settings."""
    return Store(FlipSettings.from_cli(data_dir=data_dir, **cli_flags))


def write_config(data_dir: Path, body: str) -> Path:
    """Write a ``flipboard.toml`` into *data_dir*."""
    path = data_dir / "flipboard.toml"
    path.write_text(body, encoding="utf-8")
    return path
