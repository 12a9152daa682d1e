"""Entry types and the families they belong to.

The six entry types form a closed enumeration. Each type selects one path
family (daily, weekly, monthly) and one template key. Unknown tags are
rejected with :class:`UnknownEntryTypeError`; they are never coerced into
a default.
"""

from __future__ import annotations

from enum import StrEnum
from typing import assert_never

from rkv.domain.dates import CalendarDate
from rkv.domain.errors import UnknownEntryTypeError


class EntryFamily(StrEnum):
    """Top-level vault directories that hold entries."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class EntryType(StrEnum):
    """Journal entry types."""

    MORNING = "morning"
    EVENING = "evening"
    WEEKLY_START = "weekly-start"
    WEEKLY_END = "weekly-end"
    MONTHLY_START = "monthly-start"
    MONTHLY_END = "monthly-end"

    @classmethod
    def parse(cls, tag: str | EntryType) -> EntryType:
        """Return the member for *tag* or raise UnknownEntryTypeError."""
        try:
            return cls(tag)
        except ValueError:
            raise UnknownEntryTypeError(str(tag)) from None

    @property
    def family(self) -> EntryFamily:
        match self:
            case EntryType.MORNING | EntryType.EVENING:
                return EntryFamily.DAILY
            case EntryType.WEEKLY_START | EntryType.WEEKLY_END:
                return EntryFamily.WEEKLY
            case EntryType.MONTHLY_START | EntryType.MONTHLY_END:
                return EntryFamily.MONTHLY
            case _:
                assert_never(self)

    @property
    def suffix(self) -> str:
        """Second segment of a two-part tag (``start``/``end``), else the tag.

        Any new ``<family>-<suffix>`` type picks up its suffix here without
        a new branch.
        """
        parts = self.value.split("-", 1)
        return parts[1] if len(parts) == 2 else self.value

    @property
    def template_key(self) -> str:
        """File stem of the template used to materialize this type."""
        match self:
            case EntryType.MORNING:
                return "daily-morning"
            case EntryType.EVENING:
                return "daily-evening"
            case (
                EntryType.WEEKLY_START
                | EntryType.WEEKLY_END
                | EntryType.MONTHLY_START
                | EntryType.MONTHLY_END
            ):
                return self.value
            case _:
                assert_never(self)


ENTRY_TYPE_NAMES: tuple[str, ...] = tuple(t.value for t in EntryType)


def default_entry_type(moment: CalendarDate) -> EntryType:
    """Morning before noon, evening after."""
    return EntryType.MORNING if moment.hour < 12 else EntryType.EVENING


def suggest_entry_type(moment: CalendarDate) -> EntryType:
    """Suggest the most relevant entry type for *moment*.

    Priority: first of month, last of month, Monday, Friday, then the
    time-of-day default.
    """
    if moment.day == 1:
        return EntryType.MONTHLY_START
    if moment.day == moment.days_in_month:
        return EntryType.MONTHLY_END
    if moment.weekday == 1:
        return EntryType.WEEKLY_START
    if moment.weekday == 5:
        return EntryType.WEEKLY_END
    return default_entry_type(moment)
