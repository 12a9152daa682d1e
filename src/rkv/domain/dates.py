"""CalendarDate — the validated point in time every resolution starts from.

INVARIANT: A CalendarDate is always valid. Anything that cannot be turned
into one raises :class:`InvalidDateError` at the boundary, so no
partially-valid date ever reaches the resolver or the renderer.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from rkv.domain.errors import InvalidDateError
from rkv.domain.formatting import format_date

# Shared format patterns (resolver, capture files, and the {{date}} token).
DATE_FORMAT = "yyyy-MM-dd"
YEAR_FORMAT = "yyyy"
MONTH_FORMAT = "MM"
WEEK_FORMAT = "WW"
TIME_FORMAT = "HH:mm"


@dataclass(frozen=True, slots=True)
class CalendarDate:
    """An immutable, timezone-aware moment with calendar accessors.

    Attributes:
        moment: The wrapped aware datetime. Naive values are interpreted
            as local time on construction.
    """

    moment: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.moment, datetime):
            raise InvalidDateError("expected a datetime", value=self.moment)
        if self.moment.tzinfo is None:
            object.__setattr__(self, "moment", self.moment.astimezone())

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int, day: int) -> CalendarDate:
        """Build a date at local midnight, validating each component."""
        try:
            return cls(datetime(year, month, day))
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidDateError(str(exc), value=f"{year}-{month}-{day}") from exc

    @classmethod
    def parse(cls, text: str) -> CalendarDate:
        """Parse an ISO 8601 calendar or week date, with optional time.

        Examples:
            >>> CalendarDate.parse("2024-01-15").iso_date
            '2024-01-15'
            >>> CalendarDate.parse("2024-W03-1").iso_date
            '2024-01-15'
        """
        raw = text.strip()
        if not raw:
            raise InvalidDateError("empty date string", value=text)
        try:
            return cls(datetime.fromisoformat(raw))
        except ValueError as exc:
            raise InvalidDateError(str(exc), value=text) from exc

    @classmethod
    def now(cls) -> CalendarDate:
        """The current local moment."""
        return cls(datetime.now().astimezone())

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self.moment.year

    @property
    def month(self) -> int:
        return self.moment.month

    @property
    def day(self) -> int:
        return self.moment.day

    @property
    def hour(self) -> int:
        return self.moment.hour

    @property
    def minute(self) -> int:
        return self.moment.minute

    @property
    def iso_week(self) -> int:
        return self.moment.isocalendar().week

    @property
    def iso_week_year(self) -> int:
        return self.moment.isocalendar().year

    @property
    def weekday(self) -> int:
        """ISO weekday, Monday=1 through Sunday=7."""
        return self.moment.isoweekday()

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def iso_date(self) -> str:
        """``YYYY-MM-DD``."""
        return self.format(DATE_FORMAT)

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def format(self, pattern: str) -> str:
        """Format with the token grammar of :mod:`rkv.domain.formatting`."""
        return format_date(self.moment, pattern)

    def shift(self, *, days: int) -> CalendarDate:
        """Return a new date *days* away (negative for the past)."""
        try:
            return CalendarDate(self.moment + timedelta(days=days))
        except OverflowError as exc:
            raise InvalidDateError(str(exc), value=self.iso_date) from exc

    def start_of_week(self) -> CalendarDate:
        """Midnight on the Monday of this ISO week."""
        monday = self.moment - timedelta(days=self.weekday - 1)
        return CalendarDate(monday.replace(hour=0, minute=0, second=0, microsecond=0))

    def __str__(self) -> str:
        return self.iso_date


def coerce_date(value: object) -> CalendarDate:
    """Turn *value* into a :class:`CalendarDate` or raise InvalidDateError.

    Accepts a CalendarDate, a ``datetime``, a ``date`` (local midnight),
    or an ISO 8601 string.
    """
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, datetime):
        return CalendarDate(value)
    if isinstance(value, date):
        return CalendarDate.of(value.year, value.month, value.day)
    if isinstance(value, str):
        return CalendarDate.parse(value)
    raise InvalidDateError(f"unsupported date value of type {type(value).__name__}", value=value)

