"""Template rendering — date-derived token substitution.

Not a template engine: there is no control flow, only a fixed set of
``{{...}}`` placeholders. Substitution runs in three passes, each a full
replace-all over the text produced by the previous pass:

1. ``{{date}}`` becomes ``YYYY-MM-DD``.
2. ``{{date:<pattern>}}`` is formatted with the pattern grammar from
   :mod:`rkv.domain.formatting`. An invalid pattern leaves the placeholder
   untouched and emits a warning; it never aborts rendering.
3. Named shortcuts (``{{weekNumber}}``, ``{{monthName}}``, ...). A shortcut
   whose value is unavailable becomes an empty string.

The pass order is part of the output contract.
"""

from __future__ import annotations

import re
from collections.abc import Callable

import structlog

from rkv.domain.dates import DATE_FORMAT, CalendarDate, coerce_date
from rkv.domain.errors import InvalidFormatError

logger = structlog.get_logger(__name__)

DATE_TOKEN = "{{date}}"
DATE_FORMAT_TOKEN = re.compile(r"{{date:([^}]+)}}")

_Shortcut = Callable[[CalendarDate], str | None]


def _pattern(pattern: str) -> _Shortcut:
    return lambda when: when.format(pattern)


def _iso(when: CalendarDate) -> str | None:
    return when.moment.isoformat(timespec="milliseconds")


SHORTCUTS: dict[str, _Shortcut] = {
    "dateISO": _iso,
    "dateShort": _pattern("M/d/yyyy"),
    "dateFull": _pattern("MMMM d, yyyy"),
    "dateTime": _pattern("MMM d, yyyy, h:mm a"),
    "weekNumber": _pattern("WW"),
    "weekYear": _pattern("kkkk"),
    "weekday": _pattern("cccc"),
    "monthName": _pattern("MMMM"),
    "monthShort": _pattern("MMM"),
    "monthNumber": _pattern("MM"),
    "year": _pattern("yyyy"),
    "yearShort": _pattern("yy"),
}


def render(template: str, date: object, *, warnings: list[str] | None = None) -> str:
    """Substitute date tokens in *template*.

    Args:
        template: Raw template text. Never validated or rejected.
        date: Anything :func:`~rkv.domain.dates.coerce_date` accepts.
        warnings: Optional list collecting non-fatal diagnostics.

    Raises:
        InvalidDateError: *date* is invalid. Template content never raises.

    Examples:
        >>> render("{{date}}", "2024-01-15")
        '2024-01-15'
        >>> render("{{weekNumber}} {{monthName}} {{year}}", "2024-01-15")
        '03 January 2024'
    """
    when = coerce_date(date)

    text = template.replace(DATE_TOKEN, when.format(DATE_FORMAT))

    def _format(match: re.Match[str]) -> str:
        pattern = match.group(1)
        try:
            return when.format(pattern)
        except InvalidFormatError as exc:
            logger.warning("template.invalid_date_format", pattern=pattern, reason=exc.reason)
            if warnings is not None:
                warnings.append(f"Invalid date format token: {pattern}")
            return match.group(0)

    text = DATE_FORMAT_TOKEN.sub(_format, text)

    for name, shortcut in SHORTCUTS.items():
        token = f"{{{{{name}}}}}"
        if token in text:
            text = text.replace(token, shortcut(when) or "")

    return text
