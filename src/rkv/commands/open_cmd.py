"""Command: open an existing entry (named open_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rkv.commands._base import RkvCommand

if TYPE_CHECKING:
    from rkv.commands._context import AppContext

_OPEN_EXAMPLES = """\
  rkv open
  rkv open yesterday
  rkv open week
  rkv open captures
  rkv open 2024-01-15"""


@click.command("open", cls=RkvCommand, examples=_OPEN_EXAMPLES)
@click.argument("target", metavar="[today|yesterday|week|captures|YYYY-MM-DD]", required=False)
@click.option("--no-open", is_flag=True, help="Only report the path.")
@click.pass_obj
def open_cmd(app: AppContext, target: str | None, no_open: bool) -> None:
    """Open a journal entry."""
    from rkv.services.entry import EntryService

    app.emit(EntryService(app.vault).open_entry(target, open_editor=not no_open))
