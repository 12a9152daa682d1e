"""structlog configuration for rkv.

All log output goes to stderr so it never mixes with command results on
stdout. Human mode renders short ``HH:MM:SS`` console lines; ``--log-json``
renders one JSON object per event with ISO timestamps and formatted
tracebacks. Every event carries the running subcommand as ``command``.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Third-party loggers reachable from rkv commands.
_QUIET_LIBRARIES = ("jinja2", "urllib3", "markdown_it")


def _rkv_level(*, verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
    command: str | None = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level rkv events. Wins over *quiet*.
        quiet: Only ERROR-level rkv events; warnings already reach the
            user through the command result.
        log_json: Use the JSON renderer instead of the console renderer.
        command: Subcommand name bound to every event.
    """
    structlog.contextvars.clear_contextvars()
    if command:
        structlog.contextvars.bind_contextvars(command=command)

    if log_json:
        timestamper = structlog.processors.TimeStamper(fmt="iso")
    else:
        timestamper = structlog.processors.TimeStamper(fmt="%H:%M:%S", utc=False)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
        structlog.processors.UnicodeDecoder(),
    ]

    final: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if log_json:
        final += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        final.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty(), pad_event=24))

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(foreign_pre_chain=shared_processors, processors=final)
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("rkv").setLevel(_rkv_level(verbose=verbose, quiet=quiet))
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
