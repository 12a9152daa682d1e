"""Command: quick capture into today's inbox file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rkv.commands._base import RkvCommand

if TYPE_CHECKING:
    from rkv.commands._context import AppContext

_LOG_EXAMPLES = """\
  rkv log "Idea: pair on the release checklist"
  rkv --json log "Follow up on the review"
  rkv log met with design about onboarding"""


@click.command("log", cls=RkvCommand, examples=_LOG_EXAMPLES)
@click.argument("message", nargs=-1, required=True)
@click.pass_obj
def log(app: AppContext, message: tuple[str, ...]) -> None:
    """Quick capture to inbox."""
    from rkv.services.capture import CaptureService

    app.emit(CaptureService(app.vault).log_capture(" ".join(message)))
