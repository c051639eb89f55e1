"""Shared pytest fixtures for digitgroup tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

PRESET_TOML = """\
[presets.swiss]
delimiter = "'"
group_fraction = false

[presets.si]
delimiter = "_"
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def preset_file(tmp_path: Path) -> Path:
    """A digitgroup.toml adding ``swiss`` and overriding ``si``."""
    path = tmp_path / "digitgroup.toml"
    path.write_text(PRESET_TOML, encoding="utf-8")
    return path


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray digitgroup.toml is discovered."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("digitgroup")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
