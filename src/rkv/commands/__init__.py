"""Subcommand modules for rkv.

Provides register_commands() which uses deferred imports to keep
``rkv --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rkv.commands.init_cmd import init_cmd
    from rkv.commands.log import log
    from rkv.commands.new import new
    from rkv.commands.open_cmd import open_cmd

    cli.add_command(init_cmd)
    cli.add_command(new)
    cli.add_command(log)
    cli.add_command(open_cmd)
