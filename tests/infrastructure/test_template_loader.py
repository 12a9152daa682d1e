"""Tests for template lookup and installation."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from rkv.domain.types import EntryType
from rkv.infrastructure.templates import (
    install_default_templates,
    list_default_templates,
    load_template,
    template_dir,
)

ALL_TEMPLATES = [
    "daily-evening.md",
    "daily-morning.md",
    "monthly-end.md",
    "monthly-start.md",
    "weekly-end.md",
    "weekly-start.md",
]


class TestDefaults:
    def test_packaged_templates(self) -> None:
        assert list_default_templates() == ALL_TEMPLATES

    @pytest.mark.parametrize("kind", list(EntryType))
    def test_every_entry_type_has_a_template(self, kind: EntryType) -> None:
        source = load_template(kind.template_key)
        assert source.origin == "default"
        assert source.text.startswith("# ")

    def test_unknown_key(self) -> None:
        with pytest.raises(TemplateNotFound):
            load_template("quarterly-start")


class TestVaultOverride:
    def test_vault_template_wins(self, vault_root: Path) -> None:
        folder = template_dir(vault_root)
        folder.mkdir()
        (folder / "daily-morning.md").write_text("Custom {{date}}\n", encoding="utf-8")
        source = load_template("daily-morning", vault_root=vault_root)
        assert source.origin == "vault"
        assert source.text == "Custom {{date}}\n"

    def test_falls_back_to_package(self, vault_root: Path) -> None:
        template_dir(vault_root).mkdir()
        source = load_template("weekly-end", vault_root=vault_root)
        assert source.origin == "default"

    def test_missing_template_dir(self, vault_root: Path) -> None:
        assert load_template("monthly-start", vault_root=vault_root).origin == "default"

    def test_non_utf8_override_raises(self, vault_root: Path) -> None:
        folder = template_dir(vault_root)
        folder.mkdir()
        (folder / "daily-evening.md").write_bytes(b"\xff\xfe\n")
        with pytest.raises(UnicodeDecodeError):
            load_template("daily-evening", vault_root=vault_root)


class TestInstall:
    def test_copies_all(self, vault_root: Path) -> None:
        assert install_default_templates(vault_root) == ALL_TEMPLATES
        assert sorted(p.name for p in template_dir(vault_root).iterdir()) == ALL_TEMPLATES

    def test_never_overwrites(self, vault_root: Path) -> None:
        folder = template_dir(vault_root)
        folder.mkdir()
        (folder / "daily-morning.md").write_text("mine", encoding="utf-8")
        copied = install_default_templates(vault_root)
        assert "daily-morning.md" not in copied
        assert len(copied) == 5
        assert (folder / "daily-morning.md").read_text(encoding="utf-8") == "mine"

    def test_second_run_copies_nothing(self, vault_root: Path) -> None:
        install_default_templates(vault_root)
        assert install_default_templates(vault_root) == []

    def test_installed_copy_matches_package(self, vault_root: Path) -> None:
        install_default_templates(vault_root)
        installed = (template_dir(vault_root) / "weekly-start.md").read_text(encoding="utf-8")
        assert installed == load_template("weekly-start").text
