"""Click base classes for rkv commands.

Every rkv command accepts ``--examples``, which prints its usage examples
and exits before the command body runs. Commands that take an entry type
pass ``lists_entry_types=True``: their ``--help`` epilog and ``--examples``
output then end with the valid type names taken from
:data:`rkv.domain.types.ENTRY_TYPE_NAMES`.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

from rkv.domain.types import ENTRY_TYPE_NAMES


def entry_types_line() -> str:
    return "Entry types: " + ", ".join(ENTRY_TYPE_NAMES)


def _examples_option(examples: str, footer: str | None = None) -> click.Option:
    """Eager ``--examples`` flag printing *examples* with a two-space indent."""
    body = textwrap.indent(textwrap.dedent(examples).strip("\n"), "  ")
    if footer:
        body = f"{body}\n\n{footer}"

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(body)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


class RkvCommand(click.Command):
    """Command with ``--examples`` and an optional entry-type footer."""

    def __init__(
        self,
        *args: Any,
        examples: str | None = None,
        lists_entry_types: bool = False,
        **kwargs: Any,
    ) -> None:
        footer = entry_types_line() if lists_entry_types else None
        if footer and not kwargs.get("epilog"):
            # \b keeps Click from rewrapping, which would split hyphenated names.
            kwargs["epilog"] = f"\b\n{footer}"
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(_examples_option(examples, footer))


class RkvGroup(click.Group):
    """Root group. Subcommands default to :class:`RkvCommand`."""

    command_class = RkvCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if examples:
            self.params.append(_examples_option(examples, entry_types_line()))
