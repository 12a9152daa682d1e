"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Carries the frozen settings, builds the Vault on
first use, and centralizes result emission (stdout/stderr routing + exit
codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from rkv.config.discovery import ConfigStatus
from rkv.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from rkv.config.settings import RkvSettings
    from rkv.infrastructure.vault import Vault
    from rkv.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: RkvSettings, *, command: str | None = None) -> None:
        self.settings = settings
        self._vault: Vault | None = None

        from rkv.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
            command=command,
        )

        if settings.config_status is ConfigStatus.CORRUPT:
            logger.warning("config.corrupt_using_defaults", path=str(settings.config_path))

    @property
    def vault(self) -> Vault:
        """The configured vault (created lazily on first access)."""
        if self._vault is None:
            from rkv.infrastructure.vault import Vault

            self._vault = Vault(self.settings.journal)
        return self._vault

    @property
    def interactive(self) -> bool:
        return not self.settings.no_interact

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        if self.settings.config_status is ConfigStatus.CORRUPT:
            notice = f"Config file {self.settings.config_path} is corrupt; using defaults."
            result = result.model_copy(update={"warnings": [notice, *result.warnings]})

        output = format_result(result, settings=settings)
        click.echo(output, err=not result.ok)
        # In JSON mode, warnings are already in the serialized payload.
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.ok:
            raise SystemExit(1)
