"""Open vault files in Obsidian through its URI scheme.

The platform opener (``open``, ``xdg-open``, the Windows URL handler) is
run with a bounded wait. Failures are raised as :class:`OpenerError` with
a code that distinguishes a timeout from a missing command; callers
report them and never retry.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from urllib.parse import quote

logger = logging.getLogger(__name__)

OPEN_TIMEOUT_SECONDS = 5.0

# encodeURIComponent leaves these unescaped; Obsidian expects the same.
_URI_SAFE = "-_.!~*'()"

_PLATFORM_COMMANDS: dict[str, list[str]] = {
    "darwin": ["open"],
    "win32": ["rundll32", "url.dll,FileProtocolHandler"],
    "linux": ["xdg-open"],
}
_FALLBACK_COMMAND = ["xdg-open"]

TROUBLESHOOTING = (
    "Ensure Obsidian is installed and has been opened at least once",
    "Verify the vault name matches exactly (case-sensitive)",
    "Check that the vault exists in Obsidian",
    "Try opening the file manually to verify the path is correct",
)


class OpenerError(Exception):
    """The platform opener could not hand the URI to Obsidian.

    Attributes:
        code: ``OPEN_TIMEOUT``, ``OPEN_COMMAND_NOT_FOUND`` or ``OPEN_FAILED``.
        hints: Troubleshooting lines for the user.
    """

    def __init__(self, code: str, message: str, hints: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.hints = hints or TROUBLESHOOTING


def build_obsidian_uri(vault_name: str, file_path: str) -> str:
    """``obsidian://open?vault=<name>&file=<path>`` with both parts encoded.

    A leading slash on *file_path* is dropped.

    Examples:
        >>> build_obsidian_uri("My Vault", "/daily/2024/01/2024-01-15-morning.md")
        'obsidian://open?vault=My%20Vault&file=daily%2F2024%2F01%2F2024-01-15-morning.md'
    """
    clean = file_path[1:] if file_path.startswith("/") else file_path
    return (
        f"obsidian://open?vault={quote(vault_name, safe=_URI_SAFE)}"
        f"&file={quote(clean, safe=_URI_SAFE)}"
    )


def is_platform_supported(platform: str | None = None) -> bool:
    return (platform or sys.platform) in _PLATFORM_COMMANDS


def platform_open_command(platform: str | None = None) -> list[str]:
    """Command prefix that hands a URI to the OS handler."""
    return list(_PLATFORM_COMMANDS.get(platform or sys.platform, _FALLBACK_COMMAND))


def open_uri(
    uri: str,
    *,
    platform: str | None = None,
    timeout: float = OPEN_TIMEOUT_SECONDS,
) -> None:
    """Hand *uri* to the platform opener and wait up to *timeout* seconds.

    Raises:
        OpenerError: On timeout, a missing opener binary, or a non-zero exit.
    """
    target = platform or sys.platform
    if not is_platform_supported(target):
        logger.warning("Untested platform %s; using xdg-open as fallback", target)

    cmd = [*platform_open_command(target), uri]
    logger.debug("Running opener: %s", cmd)
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError as exc:
        hints = (
            "macOS: should work out of the box",
            "Windows: ensure rundll32 is available",
            "Linux: install the xdg-utils package",
        )
        raise OpenerError("OPEN_COMMAND_NOT_FOUND", f"Command not found: {cmd[0]}", hints) from exc
    except subprocess.TimeoutExpired as exc:
        hints = ("Obsidian may not be installed or the URI handler is not configured",)
        raise OpenerError(
            "OPEN_TIMEOUT", f"Open command timed out after {timeout:g}s", hints
        ) from exc
    except subprocess.CalledProcessError as exc:
        detail = (exc.stderr or "").strip() or f"exit code {exc.returncode}"
        raise OpenerError("OPEN_FAILED", f"Failed to open in Obsidian: {detail}") from exc


def open_in_obsidian(vault_name: str, file_path: str, *, platform: str | None = None) -> str:
    """Open a vault-relative file in Obsidian. Returns the URI used."""
    uri = build_obsidian_uri(vault_name, file_path)
    open_uri(uri, platform=platform)
    return uri
