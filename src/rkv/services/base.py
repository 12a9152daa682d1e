"""BaseService — shared foundation for all rkv services.

Every service receives a :class:`Vault` at construction time, plus an
optional opener used to hand entries to the configured editor. Tests
pass a fake opener so nothing is launched.
"""

from __future__ import annotations

import errno
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from rkv.config.models import EditorKind
from rkv.infrastructure.opener import OpenerError, open_in_obsidian
from rkv.services.result import ServiceResult

if TYPE_CHECKING:
    from rkv.domain.paths import RelativePath
    from rkv.infrastructure.vault import Vault

logger = structlog.get_logger(__name__)

Opener = Callable[[str, str], str]

_ERRNO_HINTS: dict[int, str] = {
    errno.EACCES: "Permission denied. Check file/folder permissions.",
    errno.ENOSPC: "Insufficient disk space.",
    errno.ENOTDIR: "Path exists but is not a directory.",
    errno.ENOENT: "File or directory not found. Make sure the vault is initialized with 'rkv init'.",
}


class BaseService:
    """Base for all service-layer classes."""

    def __init__(self, vault: Vault, *, opener: Opener | None = None) -> None:
        self._vault = vault
        self._opener: Opener = opener or open_in_obsidian

    def _vault_missing(self, op: str) -> ServiceResult | None:
        """Failure result if the vault directory does not exist, else None."""
        if self._vault.exists():
            return None
        return ServiceResult.failure(
            op,
            "VAULT_NOT_FOUND",
            f"Vault not found at {self._vault.root}",
            expected=str(self._vault.root),
            hint="Run 'rkv init' to initialize your vault first.",
        )

    @staticmethod
    def _io_failure(op: str, exc: OSError | UnicodeDecodeError, **detail: Any) -> ServiceResult:
        """IO_ERROR result for a failed read or write.

        A file that is not UTF-8 text is reported the same way as one that
        cannot be opened.
        """
        if isinstance(exc, UnicodeDecodeError):
            message = f"File is not valid UTF-8 text ({exc.reason} at byte {exc.start})."
            code, hint = None, "Re-save the file with UTF-8 encoding."
        else:
            message = str(exc)
            code, hint = exc.errno, _ERRNO_HINTS.get(exc.errno or 0, "")
        logger.warning("io.failed", op=op, error=message, **detail)
        return ServiceResult.failure(
            op,
            "IO_ERROR",
            message,
            errno=code,
            hint=hint,
            **detail,
        )

    def _launch(
        self,
        rel: RelativePath,
        data: dict[str, Any],
        warnings: list[str],
    ) -> None:
        """Open *rel* in the configured editor, recording the outcome in *data*.

        INVARIANT: Opener failures are warnings, never errors.
        """
        editor = self._vault.config.editor
        if editor is not EditorKind.OBSIDIAN:
            data["opened"] = False
            data["open_command"] = f'{editor.value} "{self._vault.path_for(rel)}"'
            return

        try:
            data["uri"] = self._opener(self._vault.name, rel.as_posix())
            data["opened"] = True
        except OpenerError as exc:
            logger.warning("opener.failed", code=exc.code, error=exc.message)
            data["opened"] = False
            data["open_error"] = exc.code
            warnings.append(exc.message)
            warnings.extend(exc.hints)
