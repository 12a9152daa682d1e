"""Command: create a journal entry from its template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rkv.commands._base import RkvCommand

if TYPE_CHECKING:
    from rkv.commands._context import AppContext

_NEW_EXAMPLES = """\
  rkv new
  rkv new morning
  rkv new evening --yesterday
  rkv new weekly-start --date 2024-01-15
  rkv new --suggest
  rkv --json new monthly-end --no-open"""


@click.command("new", cls=RkvCommand, examples=_NEW_EXAMPLES, lists_entry_types=True)
@click.argument("entry_type", metavar="[TYPE]", required=False)
@click.option("-t", "--tomorrow", is_flag=True, help="Create tomorrow's entry.")
@click.option("-y", "--yesterday", is_flag=True, help="Create yesterday's entry.")
@click.option("-d", "--date", "date_str", default=None, help="Entry date (YYYY-MM-DD).")
@click.option("--suggest", is_flag=True, help="Pick the type from the calendar when omitted.")
@click.option("--no-open", is_flag=True, help="Do not launch the editor.")
@click.pass_obj
def new(
    app: AppContext,
    entry_type: str | None,
    tomorrow: bool,
    yesterday: bool,
    date_str: str | None,
    suggest: bool,
    no_open: bool,
) -> None:
    """Create a new journal entry.

    TYPE is one of the entry types listed below. Defaults to morning
    before noon, evening after.
    """
    if sum((tomorrow, yesterday, date_str is not None)) > 1:
        raise click.UsageError("Use only one of --tomorrow, --yesterday, or --date.")

    from rkv.services.entry import EntryService

    offset = 1 if tomorrow else -1 if yesterday else 0
    app.emit(
        EntryService(app.vault).new_entry(
            entry_type,
            date=date_str,
            offset_days=offset,
            suggest=suggest,
            open_editor=not no_open,
        )
    )

