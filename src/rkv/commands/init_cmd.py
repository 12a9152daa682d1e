"""Command: journal initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from rkv.commands._base import RkvCommand
from rkv.config.models import DEFAULT_VAULT_NAME, EditorKind, RkvConfig, validate_vault_name

if TYPE_CHECKING:
    from rkv.commands._context import AppContext

_INIT_EXAMPLES = """\
  rkv init
  rkv init --vault-path ~/Journal --vault-name Journal
  rkv --no-interact init --vault-path /tmp/journal --editor vim"""

_EDITOR_CHOICE = click.Choice([e.value for e in EditorKind], case_sensitive=False)


def _vault_path(value: str) -> Path:
    """Expand ``~`` and require an absolute path."""
    text = str(value).strip()
    if not text:
        raise click.BadParameter("Path cannot be empty.")
    path = Path(text).expanduser()
    if not path.is_absolute():
        raise click.BadParameter(
            "Please provide an absolute path (starting with / on Unix/macOS or C:\\ on Windows)."
        )
    return path


def _vault_name(value: str) -> str:
    error = validate_vault_name(value)
    if error:
        raise click.BadParameter(error)
    return value.strip()


def _folder_name(path: Path) -> str:
    """Default vault name: the folder name, or the stock name when it has none."""
    if validate_vault_name(path.name) is None:
        return path.name
    return DEFAULT_VAULT_NAME


@click.command("init", cls=RkvCommand, examples=_INIT_EXAMPLES)
@click.option("--vault-path", default=None, help="Absolute path to the journal vault.")
@click.option("--vault-name", default=None, help="Vault name (for Obsidian integration).")
@click.option("--editor", type=_EDITOR_CHOICE, default=None, help="Preferred editor.")
@click.option("--yes", is_flag=True, help="Initialize a non-empty directory without asking.")
@click.pass_obj
def init_cmd(
    app: AppContext,
    vault_path: str | None,
    vault_name: str | None,
    editor: str | None,
    yes: bool,
) -> None:
    """Initialize the RKV journal."""
    current = app.settings.journal
    interactive = app.interactive

    if vault_path is not None:
        path = _vault_path(vault_path)
    elif interactive:
        path = click.prompt(
            "Enter the absolute path to your journal vault",
            default=str(current.vault_path),
            value_proc=_vault_path,
        )
    else:
        path = current.vault_path

    if vault_name is not None:
        name = _vault_name(vault_name)
    elif interactive:
        name = click.prompt(
            "Enter your vault name (for Obsidian integration)",
            default=_folder_name(path),
            value_proc=_vault_name,
        )
    else:
        name = _folder_name(path) if vault_path is not None else current.vault_name

    if editor is None:
        editor = (
            click.prompt(
                "Select your preferred editor",
                type=_EDITOR_CHOICE,
                default=current.editor.value,
            )
            if interactive
            else current.editor.value
        )

    if path.is_dir() and any(path.iterdir()) and interactive and not yes:
        count = sum(1 for _ in path.iterdir())
        click.echo(f"Directory is not empty ({count} items found)", err=True)
        if not click.confirm("Continue initializing in this directory?", default=True):
            click.echo("Initialization cancelled.")
            return

    from rkv.services.init import InitService

    config = RkvConfig(
        vault_path=path,
        vault_name=name,
        editor=EditorKind(editor.lower()),
        default_extension=current.default_extension,
    )
    app.emit(InitService.init_vault(config, config_path=app.settings.config_path))
