"""Tests for the journal entry model."""

from datetime import date, datetime, timedelta, timezone

import pytest

from dayjournal.core.entries import (
    JournalEntry,
    format_timestamp,
    parse_date,
    parse_timestamp,
    validate_content,
)
from dayjournal.core.errors import ValidationError


@pytest.fixture
def entry():
    return JournalEntry(
        date=date(2024, 1, 1),
        content="hello",
        timestamp=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
    )


class TestTimestamps:
    def test_format_uses_utc_z_suffix(self):
        eastern = timezone(timedelta(hours=-5))
        instant = datetime(2024, 1, 1, 21, 30, tzinfo=eastern)
        assert format_timestamp(instant) == "2024-01-02T02:30:00.000Z"

    def test_parse_z_suffix(self):
        parsed = parse_timestamp("2024-01-01T10:00:00.000Z")
        assert parsed == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)

    def test_parse_naive_assumes_utc(self):
        parsed = parse_timestamp("2024-01-01T10:00:00")
        assert parsed.tzinfo is not None
        assert parsed == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


class TestParseDate:
    def test_string(self):
        assert parse_date("2024-01-01") == date(2024, 1, 1)

    def test_date_passthrough(self):
        assert parse_date(date(2024, 1, 1)) == date(2024, 1, 1)

    def test_datetime_truncates(self):
        assert parse_date(datetime(2024, 1, 1, 23, 59)) == date(2024, 1, 1)

    @pytest.mark.parametrize("value", ["", "01/01/2024", "2024-13-01", None])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            parse_date(value)


class TestValidateContent:
    def test_strips_whitespace(self):
        assert validate_content("  dear diary \n") == "dear diary"

    @pytest.mark.parametrize("value", ["", "   ", "\n\t"])
    def test_rejects_empty(self, value):
        with pytest.raises(ValidationError):
            validate_content(value)


class TestJournalEntry:
    def test_to_dict(self, entry):
        assert entry.to_dict() == {
            "date": "2024-01-01",
            "content": "hello",
            "timestamp": "2024-01-01T10:00:00.000Z",
        }

    def test_from_dict_reads_original_format(self):
        """Records written by the original app carry a JS-style Z timestamp."""
        entry = JournalEntry.from_dict(
            {"date": "2024-01-01", "content": "hello", "timestamp": "2024-01-01T10:00:00.123Z"}
        )
        assert entry.date == date(2024, 1, 1)
        assert entry.content == "hello"
        assert entry.timestamp.microsecond == 123000

    def test_from_dict_missing_field(self):
        with pytest.raises(ValidationError, match="timestamp"):
            JournalEntry.from_dict({"date": "2024-01-01", "content": "hello"})

    def test_from_dict_bad_timestamp(self):
        with pytest.raises(ValidationError):
            JournalEntry.from_dict(
                {"date": "2024-01-01", "content": "hello", "timestamp": "yesterday"}
            )

    def test_from_dict_not_a_mapping(self):
        with pytest.raises(ValidationError):
            JournalEntry.from_dict(["2024-01-01", "hello"])
