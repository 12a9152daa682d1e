"""Path resolution — (entry type, date) to a canonical vault-relative path.

INVARIANT: Resolution is pure. Nothing here touches storage; callers
adapt a :class:`RelativePath` to the host filesystem with
:meth:`RelativePath.under` at the I/O boundary.

Layout:

- Daily:   ``daily/<YYYY>/<MM>/<YYYY-MM-DD>-<type>.md``
- Weekly:  ``weekly/<YYYY>/<YYYY>-W<WW>-<start|end>.md``
- Monthly: ``monthly/<YYYY>/<YYYY>-<MM>-<start|end>.md``
- Inbox:   ``inbox/<YYYY-MM-DD>-captures.md``
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import assert_never

from rkv.domain.dates import (
    DATE_FORMAT,
    MONTH_FORMAT,
    TIME_FORMAT,
    WEEK_FORMAT,
    YEAR_FORMAT,
    CalendarDate,
    coerce_date,
)
from rkv.domain.errors import InvalidDateError
from rkv.domain.types import EntryFamily, EntryType

ENTRY_EXTENSION = ".md"
INBOX_DIR = "inbox"


@dataclass(frozen=True, slots=True, init=False)
class RelativePath:
    """Ordered path segments rooted at the vault.

    Never absolute and never escapes the vault: empty, ``.`` and ``..``
    segments are rejected, as are segments containing a separator.
    """

    parts: tuple[str, ...]

    def __init__(self, *parts: str) -> None:
        if not parts:
            msg = "RelativePath needs at least one segment"
            raise ValueError(msg)
        for part in parts:
            if part in ("", ".", "..") or "/" in part or "\\" in part:
                msg = f"Invalid path segment: {part!r}"
                raise ValueError(msg)
        object.__setattr__(self, "parts", tuple(parts))

    @classmethod
    def from_posix(cls, text: str) -> RelativePath:
        """Build from a forward-slash string, ignoring a leading slash."""
        return cls(*[p for p in text.strip("/").split("/") if p])

    @property
    def name(self) -> str:
        return self.parts[-1]

    @property
    def parent(self) -> tuple[str, ...]:
        return self.parts[:-1]

    def as_posix(self) -> str:
        return "/".join(self.parts)

    def under(self, root: Path) -> Path:
        """Adapt to the host filesystem beneath *root*."""
        return root.joinpath(*self.parts)

    def __str__(self) -> str:
        return self.as_posix()


def resolve(entry_type: str | EntryType, date: object) -> RelativePath:
    """Resolve the vault-relative path for an entry.

    The date is validated first, so an invalid date fails with
    :class:`InvalidDateError` before any type-specific logic runs.

    Raises:
        InvalidDateError: *date* cannot be turned into a CalendarDate.
        UnknownEntryTypeError: *entry_type* is not a known tag.

    Examples:
        >>> str(resolve("morning", "2024-03-05"))
        'daily/2024/03/2024-03-05-morning.md'
        >>> str(resolve("monthly-end", "2024-12-01"))
        'monthly/2024/2024-12-end.md'
    """
    when = coerce_date(date)
    kind = EntryType.parse(entry_type)

    year = when.format(YEAR_FORMAT)
    month = when.format(MONTH_FORMAT)

    match kind.family:
        case EntryFamily.DAILY:
            filename = f"{when.format(DATE_FORMAT)}-{kind.value}{ENTRY_EXTENSION}"
            return RelativePath(EntryFamily.DAILY.value, year, month, filename)
        case EntryFamily.WEEKLY:
            filename = f"{year}-W{when.format(WEEK_FORMAT)}-{kind.suffix}{ENTRY_EXTENSION}"
            return RelativePath(EntryFamily.WEEKLY.value, year, filename)
        case EntryFamily.MONTHLY:
            filename = f"{year}-{month}-{kind.suffix}{ENTRY_EXTENSION}"
            return RelativePath(EntryFamily.MONTHLY.value, year, filename)
        case _:
            assert_never(kind.family)


# ---------------------------------------------------------------------------
# Quick capture
# ---------------------------------------------------------------------------


def capture_path(date: object) -> RelativePath:
    """``inbox/<YYYY-MM-DD>-captures.md`` for the day of *date*."""
    when = coerce_date(date)
    return RelativePath(INBOX_DIR, f"{when.format(DATE_FORMAT)}-captures{ENTRY_EXTENSION}")


def capture_header(date: object) -> str:
    """Heading written when a day's capture file is first created."""
    when = coerce_date(date)
    return f"# Captures - {when.format(DATE_FORMAT)}\n\n"


def capture_line(moment: object, message: str) -> str:
    """One capture line: ``- HH:mm - message``."""
    when = coerce_date(moment)
    return f"- {when.format(TIME_FORMAT)} - {message}\n"


def count_captures(text: str) -> int:
    """Number of capture lines in a capture file body."""
    return sum(1 for line in text.split("\n") if line.startswith("- "))


# ---------------------------------------------------------------------------
# Open targets
# ---------------------------------------------------------------------------

TODAY_KEYWORDS = frozenset({"today"})
CAPTURE_KEYWORDS = frozenset({"captures", "inbox"})


@dataclass(frozen=True)
class OpenTarget:
    """Ordered candidate paths for ``rkv open`` plus a fallback hint.

    Attributes:
        candidates: Paths to try, most preferred first.
        suggestion: Command that would create the missing entry.
        label: Human-readable name of what is being opened.
    """

    candidates: tuple[RelativePath, ...]
    suggestion: str = "rkv new"
    label: str = "today"


def _daily_candidates(day: CalendarDate) -> tuple[RelativePath, ...]:
    # Evening first, then morning.
    return (resolve(EntryType.EVENING, day), resolve(EntryType.MORNING, day))


def open_target(keyword: str | None, today: object) -> OpenTarget:
    """Map an ``open`` argument to candidate entry paths.

    Accepts ``today`` (or nothing), ``yesterday``, ``week``,
    ``captures``/``inbox``, or an ISO date.

    Raises:
        InvalidDateError: *keyword* is neither a keyword nor a valid date.
    """
    now = coerce_date(today)
    key = (keyword or "today").strip().lower()

    if key in TODAY_KEYWORDS:
        return OpenTarget(_daily_candidates(now), label="today")
    if key == "yesterday":
        return OpenTarget(
            _daily_candidates(now.shift(days=-1)),
            suggestion="rkv new --yesterday",
            label="yesterday",
        )
    if key == "week":
        monday = now.start_of_week()
        return OpenTarget(
            (resolve(EntryType.WEEKLY_START, monday),),
            suggestion="rkv new weekly-start",
            label="week",
        )
    if key in CAPTURE_KEYWORDS:
        return OpenTarget(
            (capture_path(now),),
            suggestion='rkv log "your message"',
            label="captures",
        )

    try:
        day = CalendarDate.parse(keyword or "")
    except InvalidDateError as exc:
        raise InvalidDateError(f"not a date or keyword: {exc.reason}", value=keyword) from exc
    return OpenTarget(
        _daily_candidates(day),
        suggestion=f"rkv new [type] --date {day.format(DATE_FORMAT)}",
        label=day.format(DATE_FORMAT),
    )
