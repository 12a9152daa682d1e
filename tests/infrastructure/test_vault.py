"""Tests for Vault filesystem access."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from rkv.config.models import RkvConfig
from rkv.domain.paths import RelativePath
from rkv.infrastructure.vault import Vault, first_existing


class TestFirstExisting:
    def test_returns_first_match(self) -> None:
        assert first_existing([1, 2, 3, 4], lambda n: n % 2 == 0) == 2

    def test_none_when_nothing_matches(self) -> None:
        assert first_existing(["a", "b"], lambda s: False) is None

    def test_stops_at_first_match(self) -> None:
        produced: list[int] = []

        def candidates() -> Iterator[int]:
            for n in range(10):
                produced.append(n)
                yield n

        assert first_existing(candidates(), lambda n: n == 2) == 2
        assert produced == [0, 1, 2]

    def test_predicate_not_called_after_match(self) -> None:
        checked: list[str] = []

        def exists(name: str) -> bool:
            checked.append(name)
            return name == "evening"

        assert first_existing(["evening", "morning"], exists) == "evening"
        assert checked == ["evening"]


class TestVault:
    def test_attributes(self, vault: Vault, vault_root: Path) -> None:
        assert vault.root == vault_root
        assert vault.name == "Test Vault"
        assert vault.exists()

    def test_missing_root(self, tmp_path: Path) -> None:
        assert not Vault(RkvConfig(vault_path=tmp_path / "absent")).exists()

    def test_write_creates_parents(self, vault: Vault, vault_root: Path) -> None:
        rel = RelativePath("daily", "2024", "01", "2024-01-15-morning.md")
        path = vault.write_text(rel, "# Hello\n")
        assert path == vault_root / "daily" / "2024" / "01" / "2024-01-15-morning.md"
        assert vault.has(rel)
        assert vault.read_text(rel) == "# Hello\n"

    def test_has_ignores_directories(self, vault: Vault, vault_root: Path) -> None:
        (vault_root / "inbox").mkdir()
        assert not vault.has(RelativePath("inbox"))

    def test_append_writes_header_once(self, vault: Vault) -> None:
        rel = RelativePath("inbox", "2024-01-15-captures.md")
        vault.append_text(rel, "- one\n", header="# Head\n\n")
        vault.append_text(rel, "- two\n", header="# Head\n\n")
        assert vault.read_text(rel) == "# Head\n\n- one\n- two\n"

    def test_first_existing(self, vault: Vault) -> None:
        morning = RelativePath("daily", "morning.md")
        evening = RelativePath("daily", "evening.md")
        vault.write_text(morning, "")
        assert vault.first_existing([evening, morning]) == morning
        vault.write_text(evening, "")
        assert vault.first_existing([evening, morning]) == evening

    def test_ensure_dirs_reports_new_only(self, vault: Vault, vault_root: Path) -> None:
        (vault_root / "inbox").mkdir()
        created = vault.ensure_dirs(["inbox", "daily/2024/01", ".templates"])
        assert created == ["daily/2024/01", ".templates"]
        assert (vault_root / "daily" / "2024" / "01").is_dir()
        assert vault.ensure_dirs(["inbox", "daily/2024/01"]) == []
