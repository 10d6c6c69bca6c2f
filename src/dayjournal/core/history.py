"""History listing helpers - no I/O dependencies."""

from datetime import date

from .entries import JournalEntry

DEFAULT_PREVIEW_LENGTH = 100


def sort_newest_first(entries: list[JournalEntry]) -> list[JournalEntry]:
    """Sort entries by timestamp, newest first. Ties keep insertion order."""
    return sorted(entries, key=lambda e: e.timestamp, reverse=True)


def preview(content: str, limit: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """Truncate content to `limit` characters, marking the cut with '...'."""
    if len(content) <= limit:
        return content
    return content[:limit] + "..."


def format_entry_date(entry_date: date) -> str:
    """Long form, e.g. 'Monday, January 15, 2024'."""
    return f"{entry_date.strftime('%A, %B')} {entry_date.day}, {entry_date.year}"
