"""Tests for the daily-write policy and history helpers."""

from datetime import date, datetime, time, timedelta, timezone

import pytest

from dayjournal.core.entries import JournalEntry
from dayjournal.core.history import format_entry_date, preview, sort_newest_first
from dayjournal.core.policy import DayState, can_edit, can_write, derive_state, find_by_date


@pytest.fixture
def today():
    return date(2025, 1, 15)


def make_entry(entry_date: date, content: str = "text", hour: int = 10) -> JournalEntry:
    return JournalEntry(
        date=entry_date,
        content=content,
        timestamp=datetime.combine(entry_date, time(hour, 0), tzinfo=timezone.utc),
    )


class TestFindByDate:
    def test_absent_for_unsaved_date(self, today):
        entries = [make_entry(today - timedelta(days=1))]
        assert find_by_date(entries, today) is None

    def test_returns_first_match(self, today):
        first = make_entry(today, "first")
        second = make_entry(today, "second")
        assert find_by_date([first, second], today) is first


class TestCanWrite:
    def test_empty(self, today):
        assert can_write([], today) is True

    def test_entry_for_other_day(self, today):
        assert can_write([make_entry(today - timedelta(days=1))], today) is True

    def test_entry_for_today(self, today):
        assert can_write([make_entry(today)], today) is False


class TestCanEdit:
    def test_today_is_editable(self, today):
        assert can_edit(make_entry(today), today) is True

    def test_past_is_view_only(self, today):
        assert can_edit(make_entry(today - timedelta(days=1)), today) is False


class TestDeriveState:
    def test_can_write(self, today):
        assert derive_state(today, today, None) == DayState.CAN_WRITE

    def test_completed(self, today):
        assert derive_state(today, today, make_entry(today)) == DayState.COMPLETED

    def test_past_date_is_view_only(self, today):
        past = today - timedelta(days=3)
        assert derive_state(past, today, make_entry(past)) == DayState.VIEW_ONLY

    def test_past_date_without_entry_is_view_only(self, today):
        assert derive_state(today - timedelta(days=3), today, None) == DayState.VIEW_ONLY


class TestHistory:
    def test_sort_newest_first(self, today):
        old = make_entry(today - timedelta(days=2))
        mid = make_entry(today - timedelta(days=1))
        new = make_entry(today)
        assert sort_newest_first([mid, new, old]) == [new, mid, old]

    def test_sort_does_not_mutate_input(self, today):
        entries = [make_entry(today - timedelta(days=1)), make_entry(today)]
        sort_newest_first(entries)
        assert entries[0].date == today - timedelta(days=1)

    def test_preview_short(self):
        assert preview("short") == "short"

    def test_preview_truncates(self):
        text = "x" * 150
        result = preview(text)
        assert result == "x" * 100 + "..."

    def test_preview_exact_limit(self):
        assert preview("abc", limit=3) == "abc"

    def test_format_entry_date(self, today):
        assert format_entry_date(today) == "Wednesday, January 15, 2025"
