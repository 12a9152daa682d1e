"""InitService — set up a journal vault and persist its configuration.

Pipeline: SAVE CONFIG → FOLDERS → TEMPLATES → WELCOME → RESPOND

Re-running on an existing vault is safe: folders are created only when
missing, templates and the welcome file are never overwritten.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from rkv.config.discovery import save_config
from rkv.config.models import EditorKind, RkvConfig
from rkv.domain.dates import MONTH_FORMAT, YEAR_FORMAT, CalendarDate
from rkv.domain.paths import INBOX_DIR, RelativePath
from rkv.domain.types import EntryFamily
from rkv.infrastructure.templates import TEMPLATE_DIRNAME, install_default_templates
from rkv.infrastructure.vault import Vault
from rkv.services.base import BaseService
from rkv.services.result import ServiceResult

logger = structlog.get_logger(__name__)

WELCOME_FILENAME = "Welcome to RKV.md"

_WELCOME_TEMPLATE = """\
# Welcome to RKV!

Your journal has been successfully initialized.

## Getting Started

- **Create a new entry**: `rkv new`
- **Quick capture thoughts**: `rkv log "your thought here"`
- **Open today's entry**: `rkv open`

## Folder Structure

- `daily/` - Daily morning and evening entries
- `weekly/` - Weekly planning and review
- `monthly/` - Monthly planning and review
- `quarterly/` - Quarterly planning and review
- `inbox/` - Quick captures and unprocessed thoughts
- `.templates/` - Customizable entry templates

## Customization

You can edit the templates in the `.templates/` folder to customize your journal entries.

**Vault Path**: {vault_path}
**Vault Name**: {vault_name}
**Editor**: {editor}

Happy journaling!
"""


def vault_folders(now: CalendarDate) -> list[str]:
    """Folders created for a fresh vault, dated folders for *now*."""
    year = now.format(YEAR_FORMAT)
    month = now.format(MONTH_FORMAT)
    return [
        f"{EntryFamily.DAILY}/{year}/{month}",
        f"{EntryFamily.WEEKLY}/{year}",
        f"{EntryFamily.MONTHLY}/{year}",
        f"quarterly/{year}",
        INBOX_DIR,
        TEMPLATE_DIRNAME,
    ]


def render_welcome(config: RkvConfig) -> str:
    return _WELCOME_TEMPLATE.format(
        vault_path=config.vault_path,
        vault_name=config.vault_name,
        editor=config.editor.value,
    )


class InitService(BaseService):
    """Creates the vault layout for a configuration."""

    @classmethod
    def init_vault(
        cls,
        config: RkvConfig,
        *,
        config_path: Path | None = None,
        now: CalendarDate | None = None,
    ) -> ServiceResult:
        """Initialize the vault described by *config* and save the config.

        Args:
            config: Journal configuration to persist.
            config_path: Where to save it (default ``~/.rkv/config.json``).
            now: Moment used for the dated folders.
        """
        return cls(Vault(config))._init(config_path=config_path, now=now or CalendarDate.now())

    def _init(self, *, config_path: Path | None, now: CalendarDate) -> ServiceResult:
        op = "init_vault"
        warnings: list[str] = []
        config = self._vault.config
        root = self._vault.root

        if root.exists() and not root.is_dir():
            return ServiceResult.failure(
                op,
                "IO_ERROR",
                f"Path exists but is not a directory: {root}",
                hint="Choose a different vault path.",
            )

        existed = root.is_dir()
        try:
            root.mkdir(parents=True, exist_ok=True)
            saved_to = save_config(config, config_path)
            folders_created = self._vault.ensure_dirs(vault_folders(now))
        except OSError as exc:
            return self._io_failure(op, exc)

        # ── TEMPLATES ─────────────────────────────────────────────
        templates_copied: list[str] = []
        try:
            templates_copied = install_default_templates(root)
        except OSError as exc:
            logger.warning("init.templates_failed", error=str(exc))
            warnings.append(f"Could not copy templates: {exc}")
            warnings.append("You can manually copy templates later if needed.")

        # ── WELCOME ───────────────────────────────────────────────
        welcome = RelativePath(WELCOME_FILENAME)
        welcome_created = False
        if not self._vault.has(welcome):
            try:
                self._vault.write_text(welcome, render_welcome(config))
                welcome_created = True
            except OSError as exc:
                return self._io_failure(op, exc)

        logger.info("vault.initialized", root=str(root), folders=len(folders_created))

        next_steps = [
            "Create your first entry: rkv new",
            f"Customize templates in {TEMPLATE_DIRNAME}/ folder",
        ]
        if config.editor is EditorKind.OBSIDIAN:
            next_steps.append("Open Obsidian and add this vault to access your journal")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "vault_path": str(root),
                "vault_name": config.vault_name,
                "editor": config.editor.value,
                "config_path": str(saved_to),
                "existing_directory": existed,
                "folders_created": folders_created,
                "templates_copied": templates_copied,
                "welcome_created": welcome_created,
                "next_steps": next_steps,
            },
            warnings=warnings,
        )
