"""Tests for entry types and type selection."""

from __future__ import annotations

import pytest

from rkv.domain.dates import CalendarDate
from rkv.domain.errors import UnknownEntryTypeError
from rkv.domain.types import (
    ENTRY_TYPE_NAMES,
    EntryFamily,
    EntryType,
    default_entry_type,
    suggest_entry_type,
)


class TestEntryType:
    def test_six_types(self) -> None:
        assert ENTRY_TYPE_NAMES == (
            "morning",
            "evening",
            "weekly-start",
            "weekly-end",
            "monthly-start",
            "monthly-end",
        )

    @pytest.mark.parametrize(
        ("tag", "family", "suffix", "template_key"),
        [
            ("morning", EntryFamily.DAILY, "morning", "daily-morning"),
            ("evening", EntryFamily.DAILY, "evening", "daily-evening"),
            ("weekly-start", EntryFamily.WEEKLY, "start", "weekly-start"),
            ("weekly-end", EntryFamily.WEEKLY, "end", "weekly-end"),
            ("monthly-start", EntryFamily.MONTHLY, "start", "monthly-start"),
            ("monthly-end", EntryFamily.MONTHLY, "end", "monthly-end"),
        ],
    )
    def test_properties(
        self, tag: str, family: EntryFamily, suffix: str, template_key: str
    ) -> None:
        kind = EntryType.parse(tag)
        assert kind.family is family
        assert kind.suffix == suffix
        assert kind.template_key == template_key

    def test_parse_accepts_member(self) -> None:
        assert EntryType.parse(EntryType.WEEKLY_END) is EntryType.WEEKLY_END

    @pytest.mark.parametrize("tag", ["bogus-type", "Morning", "", "daily", "weekly"])
    def test_parse_rejects_unknown(self, tag: str) -> None:
        with pytest.raises(UnknownEntryTypeError) as exc_info:
            EntryType.parse(tag)
        assert exc_info.value.tag == tag


class TestDefaultEntryType:
    def test_before_noon_is_morning(self) -> None:
        assert default_entry_type(CalendarDate.parse("2024-01-17T11:59:00")) is EntryType.MORNING

    def test_noon_is_evening(self) -> None:
        assert default_entry_type(CalendarDate.parse("2024-01-17T12:00:00")) is EntryType.EVENING


class TestSuggestEntryType:
    @pytest.mark.parametrize(
        ("moment", "expected"),
        [
            # 2024-03-01 is a Friday: first of month wins.
            ("2024-03-01T09:00:00", EntryType.MONTHLY_START),
            ("2024-02-29T09:00:00", EntryType.MONTHLY_END),
            ("2024-01-15T09:00:00", EntryType.WEEKLY_START),
            ("2024-01-19T09:00:00", EntryType.WEEKLY_END),
            ("2024-01-17T09:00:00", EntryType.MORNING),
            ("2024-01-17T20:00:00", EntryType.EVENING),
        ],
    )
    def test_priority(self, moment: str, expected: EntryType) -> None:
        assert suggest_entry_type(CalendarDate.parse(moment)) is expected

    def test_last_day_of_month_beats_friday(self) -> None:
        # 2024-05-31 is a Friday.
        assert suggest_entry_type(CalendarDate.parse("2024-05-31")) is EntryType.MONTHLY_END
