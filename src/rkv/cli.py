"""Root CLI group for rkv with global flags and command registration."""

from __future__ import annotations

import click

from rkv import __version__
from rkv.commands import register_commands
from rkv.commands._base import RkvGroup
from rkv.commands._context import AppContext
from rkv.config.settings import RkvSettings


_ROOT_EXAMPLES = """\
  rkv init
  rkv new
  rkv log "Shipped the migration"
  rkv open yesterday
  rkv --json new weekly-start --no-open"""


@click.group(cls=RkvGroup, invoke_without_command=True, examples=_ROOT_EXAMPLES)
@click.version_option(version=__version__, prog_name="rkv")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """RKV - Professional development journaling."""
    ctx.ensure_object(dict)
    settings = RkvSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings, command=ctx.invoked_subcommand)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
