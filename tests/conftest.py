"""Shared pytest fixtures and test helpers for rkv tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from rkv.config.models import EditorKind, RkvConfig
from rkv.domain.dates import CalendarDate
from rkv.infrastructure.opener import OpenerError
from rkv.infrastructure.vault import Vault


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``~`` at a temp directory so no test touches the real config."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("RKV_CONFIG", raising=False)
    monkeypatch.delenv("RKV_JOURNAL__VAULT_NAME", raising=False)
    monkeypatch.delenv("RKV_JOURNAL__VAULT_PATH", raising=False)
    monkeypatch.delenv("RKV_JOURNAL__EDITOR", raising=False)
    return home


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the logging setup each CLI invocation performs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    rkv_logger = logging.getLogger("rkv")
    rkv_level = rkv_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    rkv_logger.setLevel(rkv_level)
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def vault_root(tmp_path: Path) -> Path:
    """Empty, existing vault directory."""
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture
def journal_config(vault_root: Path) -> RkvConfig:
    return RkvConfig(vault_path=vault_root, vault_name="Test Vault", editor=EditorKind.OBSIDIAN)


@pytest.fixture
def vault(journal_config: RkvConfig) -> Vault:
    return Vault(journal_config)


@pytest.fixture
def config_file(tmp_path: Path, vault_root: Path) -> Path:
    """A config file for the CLI pointing at ``vault_root`` with the vim editor.

    vim never launches anything, so command tests stay side-effect free.
    """
    path = tmp_path / "config" / "config.json"
    path.parent.mkdir()
    path.write_text(
        json.dumps({"vaultPath": str(vault_root), "vaultName": "Test Vault", "editor": "vim"}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def monday() -> CalendarDate:
    """Monday 2024-01-15, 09:05 local time."""
    return CalendarDate.parse("2024-01-15T09:05:00")


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class FakeOpener:
    """Records open requests instead of launching Obsidian."""

    def __init__(self, error: OpenerError | None = None) -> None:
        self.calls: list[tuple[str, str]] = []
        self.error = error

    def __call__(self, vault_name: str, file_path: str) -> str:
        self.calls.append((vault_name, file_path))
        if self.error is not None:
            raise self.error
        return f"obsidian://open?vault={vault_name}&file={file_path}"


@pytest.fixture
def opener() -> FakeOpener:
    return FakeOpener()
