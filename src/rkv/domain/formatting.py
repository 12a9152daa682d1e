"""Date-format pattern grammar shared by the path resolver and renderer.

Patterns follow the Luxon token vocabulary, so existing vault templates
keep rendering identically:

- A run of the same ASCII letter is one token (``yyyy``, ``MM``, ``cccc``).
- Text wrapped in single quotes is literal (``'W'WW``); ``''`` is a quote.
- Every other character is copied through unchanged.

Month and weekday names are always English. Unknown tokens, unterminated
quotes and empty patterns raise :class:`InvalidFormatError`.

Examples:
    >>> from datetime import datetime
    >>> format_date(datetime(2024, 1, 15), "yyyy-MM-dd")
    '2024-01-15'
    >>> format_date(datetime(2024, 1, 15), "cccc, MMMM d")
    'Monday, January 15'
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from rkv.domain.errors import InvalidFormatError

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def _hour12(moment: datetime) -> int:
    return moment.hour % 12 or 12


def _offset(moment: datetime, style: str) -> str:
    delta = moment.utcoffset()
    if delta is None:
        return ""
    total = int(delta.total_seconds()) // 60
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total), 60)
    if style == "narrow":
        return f"{sign}{hours}" if not minutes else f"{sign}{hours}:{minutes:02d}"
    if style == "techie":
        return f"{sign}{hours:02d}{minutes:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


_Field = Callable[[datetime], str]

FIELDS: dict[str, _Field] = {
    # Calendar year
    "y": lambda m: str(m.year),
    "yy": lambda m: f"{m.year % 100:02d}",
    "yyyy": lambda m: f"{m.year:04d}",
    # ISO week-numbering year
    "k": lambda m: str(m.isocalendar().year),
    "kk": lambda m: f"{m.isocalendar().year % 100:02d}",
    "kkkk": lambda m: f"{m.isocalendar().year:04d}",
    # Month (format and standalone forms are identical in English)
    "M": lambda m: str(m.month),
    "MM": lambda m: f"{m.month:02d}",
    "MMM": lambda m: MONTH_NAMES[m.month - 1][:3],
    "MMMM": lambda m: MONTH_NAMES[m.month - 1],
    "L": lambda m: str(m.month),
    "LL": lambda m: f"{m.month:02d}",
    "LLL": lambda m: MONTH_NAMES[m.month - 1][:3],
    "LLLL": lambda m: MONTH_NAMES[m.month - 1],
    # Day of month / day of year
    "d": lambda m: str(m.day),
    "dd": lambda m: f"{m.day:02d}",
    "o": lambda m: str(m.timetuple().tm_yday),
    "ooo": lambda m: f"{m.timetuple().tm_yday:03d}",
    # Weekday (ISO: Monday=1)
    "c": lambda m: str(m.isoweekday()),
    "ccc": lambda m: WEEKDAY_NAMES[m.weekday()][:3],
    "cccc": lambda m: WEEKDAY_NAMES[m.weekday()],
    "E": lambda m: str(m.isoweekday()),
    "EEE": lambda m: WEEKDAY_NAMES[m.weekday()][:3],
    "EEEE": lambda m: WEEKDAY_NAMES[m.weekday()],
    # ISO week number
    "W": lambda m: str(m.isocalendar().week),
    "WW": lambda m: f"{m.isocalendar().week:02d}",
    # Quarter
    "q": lambda m: str((m.month - 1) // 3 + 1),
    "qq": lambda m: f"{(m.month - 1) // 3 + 1:02d}",
    # Time of day
    "H": lambda m: str(m.hour),
    "HH": lambda m: f"{m.hour:02d}",
    "h": lambda m: str(_hour12(m)),
    "hh": lambda m: f"{_hour12(m):02d}",
    "m": lambda m: str(m.minute),
    "mm": lambda m: f"{m.minute:02d}",
    "s": lambda m: str(m.second),
    "ss": lambda m: f"{m.second:02d}",
    "S": lambda m: str(m.microsecond // 1000),
    "SSS": lambda m: f"{m.microsecond // 1000:03d}",
    "a": lambda m: "AM" if m.hour < 12 else "PM",
    # UTC offset
    "Z": lambda m: _offset(m, "narrow"),
    "ZZ": lambda m: _offset(m, "short"),
    "ZZZ": lambda m: _offset(m, "techie"),
}


def tokenize_pattern(pattern: str) -> list[tuple[bool, str]]:
    """Split *pattern* into ``(is_literal, text)`` pairs.

    Raises:
        InvalidFormatError: On an empty pattern, an unterminated quote,
            or a letter run that is not a known token.
    """
    if not pattern:
        raise InvalidFormatError(pattern, "empty pattern")

    tokens: list[tuple[bool, str]] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if pattern.startswith("''", i):
                tokens.append((True, "'"))
                i += 2
                continue
            end = pattern.find("'", i + 1)
            if end == -1:
                raise InvalidFormatError(pattern, "unterminated quoted literal")
            tokens.append((True, pattern[i + 1 : end]))
            i = end + 1
        elif ch.isascii() and ch.isalpha():
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            run = pattern[i:j]
            if run not in FIELDS:
                raise InvalidFormatError(pattern, f"unsupported token {run!r}")
            tokens.append((False, run))
            i = j
        else:
            tokens.append((True, ch))
            i += 1
    return tokens


def format_date(moment: datetime, pattern: str) -> str:
    """Format *moment* according to a token *pattern*."""
    return "".join(
        text if is_literal else FIELDS[text](moment)
        for is_literal, text in tokenize_pattern(pattern)
    )
