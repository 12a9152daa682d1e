"""Vault — filesystem access rooted at the user's journal directory.

The Vault is the single I/O dependency injected into every service. The
domain layer only ever produces :class:`RelativePath` values; this class
adapts them to host paths and performs the reads and writes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from rkv.domain.paths import RelativePath

if TYPE_CHECKING:
    from rkv.config.models import RkvConfig

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def first_existing(candidates: Iterable[_T], exists: Callable[[_T], bool]) -> _T | None:
    """Return the first candidate for which *exists* is true.

    Candidates are evaluated lazily in order and the search stops at the
    first match, so generators only produce what is needed.
    """
    for candidate in candidates:
        if exists(candidate):
            return candidate
    return None


class Vault:
    """A journal vault on disk.

    Attributes:
        root: Absolute vault directory.
        name: Vault name used for editor integration (Obsidian URIs).
    """

    def __init__(self, config: RkvConfig) -> None:
        self._config = config
        self.root: Path = config.vault_path
        self.name: str = config.vault_name

    @property
    def config(self) -> RkvConfig:
        return self._config

    def exists(self) -> bool:
        """Whether the vault directory itself exists."""
        return self.root.is_dir()

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def path_for(self, rel: RelativePath) -> Path:
        """Host path for a vault-relative path."""
        return rel.under(self.root)

    def has(self, rel: RelativePath) -> bool:
        return self.path_for(rel).is_file()

    def first_existing(self, candidates: Iterable[RelativePath]) -> RelativePath | None:
        """First candidate that exists as a file in this vault."""
        return first_existing(candidates, self.has)

    # ------------------------------------------------------------------
    # File I/O
    # ------------------------------------------------------------------

    def read_text(self, rel: RelativePath) -> str:
        return self.path_for(rel).read_text(encoding="utf-8")

    def write_text(self, rel: RelativePath, content: str) -> Path:
        """Write *content* to *rel*, creating parent directories."""
        path = self.path_for(rel)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.debug("Wrote %s", rel)
        return path

    def append_text(self, rel: RelativePath, content: str, *, header: str = "") -> Path:
        """Append *content* to *rel*, writing *header* first if the file is new."""
        path = self.path_for(rel)
        path.parent.mkdir(parents=True, exist_ok=True)
        is_new = not path.exists()
        with path.open("a", encoding="utf-8") as fh:
            if is_new and header:
                fh.write(header)
            fh.write(content)
        logger.debug("Appended to %s (new=%s)", rel, is_new)
        return path

    def ensure_dirs(self, folders: Iterable[str]) -> list[str]:
        """Create each vault-relative folder. Returns those newly created."""
        created: list[str] = []
        for folder in folders:
            path = RelativePath.from_posix(folder).under(self.root)
            if not path.is_dir():
                path.mkdir(parents=True, exist_ok=True)
                created.append(folder)
        return created
