"""EntryService — create and open journal entries.

new_entry pipeline: VALIDATE → RESOLVE → (EXISTS? skip) → TEMPLATE → RENDER
→ PERSIST → LAUNCH → RESPOND
"""

from __future__ import annotations

from typing import Any

import structlog
from jinja2 import TemplateNotFound

from rkv.domain.dates import CalendarDate, coerce_date
from rkv.domain.errors import InvalidDateError, UnknownEntryTypeError
from rkv.domain.paths import open_target, resolve
from rkv.domain.templates import render
from rkv.domain.types import (
    ENTRY_TYPE_NAMES,
    EntryType,
    default_entry_type,
    suggest_entry_type,
)
from rkv.infrastructure.templates import TEMPLATE_DIRNAME, load_template
from rkv.services.base import BaseService
from rkv.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class EntryService(BaseService):
    """Creates entries from templates and opens existing ones."""

    def new_entry(
        self,
        entry_type: str | None = None,
        *,
        date: object | None = None,
        offset_days: int = 0,
        suggest: bool = False,
        now: CalendarDate | None = None,
        open_editor: bool = True,
    ) -> ServiceResult:
        """Create (or reuse) the entry of *entry_type* for a date.

        Args:
            entry_type: One of the six entry tags. Defaults by time of day,
                or by :func:`suggest_entry_type` when *suggest* is set.
            date: Explicit date (ISO string, date, or CalendarDate).
            offset_days: Shift from *now* when no explicit date is given
                (``1`` for tomorrow, ``-1`` for yesterday).
            now: Current moment; defaults to the local clock.
            open_editor: Launch the configured editor afterwards.
        """
        op = "new_entry"
        warnings: list[str] = []

        missing = self._vault_missing(op)
        if missing is not None:
            return missing

        current = now or CalendarDate.now()
        defaulted = entry_type is None
        if entry_type is None:
            entry_type = (suggest_entry_type if suggest else default_entry_type)(current)

        # ── VALIDATE → RESOLVE ────────────────────────────────────
        try:
            target = coerce_date(date) if date is not None else current.shift(days=offset_days)
            rel = resolve(entry_type, target)
        except InvalidDateError as exc:
            return ServiceResult.failure(
                op,
                "INVALID_DATE",
                f"{exc}. Please use YYYY-MM-DD format.",
                reason=exc.reason,
            )
        except UnknownEntryTypeError as exc:
            return ServiceResult.failure(
                op,
                "UNKNOWN_TYPE",
                f"Invalid entry type: {exc.tag}",
                valid_types=list(ENTRY_TYPE_NAMES),
            )

        kind = EntryType.parse(entry_type)
        data: dict[str, Any] = {
            "type": kind.value,
            "date": target.iso_date,
            "path": rel.as_posix(),
            "full_path": str(self._vault.path_for(rel)),
            "defaulted_type": defaulted,
        }

        if self._vault.has(rel):
            logger.info("entry.exists", path=rel.as_posix())
            data["created"] = False
        else:
            # ── TEMPLATE → RENDER → PERSIST ───────────────────────
            try:
                source = load_template(kind.template_key, vault_root=self._vault.root)
            except TemplateNotFound:
                return ServiceResult.failure(
                    op,
                    "TEMPLATE_NOT_FOUND",
                    f"Template not found: {kind.template_key}.md",
                    template=kind.template_key,
                    hint=f"Check {TEMPLATE_DIRNAME}/ or run 'rkv init' to restore defaults.",
                )
            except (OSError, UnicodeDecodeError) as exc:
                return self._io_failure(op, exc, template=kind.template_key)

            content = render(source.text, target, warnings=warnings)
            try:
                self._vault.write_text(rel, content)
            except OSError as exc:
                return self._io_failure(op, exc, path=rel.as_posix())

            logger.info("entry.created", path=rel.as_posix(), template=source.origin)
            data["created"] = True
            data["template"] = kind.template_key
            data["template_origin"] = source.origin

        # ── LAUNCH ────────────────────────────────────────────────
        if open_editor:
            self._launch(rel, data, warnings)

        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def open_entry(
        self,
        target: str | None = None,
        *,
        now: CalendarDate | None = None,
        open_editor: bool = True,
    ) -> ServiceResult:
        """Open the first existing entry for a keyword or date.

        *target* is ``today`` (default), ``yesterday``, ``week``,
        ``captures``/``inbox``, or an ISO date.
        """
        op = "open_entry"
        warnings: list[str] = []

        missing = self._vault_missing(op)
        if missing is not None:
            return missing

        try:
            candidates = open_target(target, now or CalendarDate.now())
        except InvalidDateError:
            return ServiceResult.failure(
                op,
                "INVALID_DATE",
                f"Invalid date or keyword: {target}",
            )

        found = self._vault.first_existing(candidates.candidates)
        if found is None:
            return ServiceResult.failure(
                op,
                "ENTRY_NOT_FOUND",
                "Entry not found.",
                target=candidates.label,
                candidates=[c.as_posix() for c in candidates.candidates],
                suggestion=candidates.suggestion,
            )

        data: dict[str, Any] = {
            "target": candidates.label,
            "path": found.as_posix(),
            "full_path": str(self._vault.path_for(found)),
        }
        if open_editor:
            self._launch(found, data, warnings)
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
