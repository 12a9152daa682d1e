"""CaptureService — timestamped quick capture into the daily inbox file."""

from __future__ import annotations

import structlog

from rkv.domain.dates import TIME_FORMAT, CalendarDate
from rkv.domain.paths import capture_header, capture_line, capture_path, count_captures
from rkv.services.base import BaseService
from rkv.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class CaptureService(BaseService):
    """Appends ``- HH:mm - message`` lines to ``inbox/<date>-captures.md``."""

    def log_capture(self, message: str, *, now: CalendarDate | None = None) -> ServiceResult:
        op = "log_capture"

        text = " ".join(message.split("\n")).strip()
        if not text:
            return ServiceResult.failure(op, "EMPTY_MESSAGE", "Nothing to capture.")

        missing = self._vault_missing(op)
        if missing is not None:
            return missing

        moment = now or CalendarDate.now()
        rel = capture_path(moment)
        # Read before appending so an unreadable file is left untouched.
        try:
            existing = self._vault.read_text(rel) if self._vault.has(rel) else ""
            self._vault.append_text(rel, capture_line(moment, text), header=capture_header(moment))
        except (OSError, UnicodeDecodeError) as exc:
            return self._io_failure(op, exc, path=rel.as_posix())
        count = count_captures(existing) + 1

        logger.info("capture.logged", path=rel.as_posix(), count=count)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": rel.as_posix(),
                "time": moment.format(TIME_FORMAT),
                "message": text,
                "count": count,
            },
        )
