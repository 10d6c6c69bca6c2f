"""Journal entry storage interface."""

from datetime import date
from typing import Protocol

from dayjournal.core.entries import JournalEntry


class EntryStore(Protocol):
    """Interface for a durable list of entries addressable by date."""

    def list_entries(self) -> list[JournalEntry]:
        """All entries in insertion order."""
        ...

    def append_entry(self, entry: JournalEntry) -> None:
        """Add an entry and persist before returning."""
        ...

    def update_entry(self, entry: JournalEntry) -> None:
        """Replace the entry with the same date. Raises NotFoundError if none."""
        ...

    def find_by_date(self, target_date: date) -> JournalEntry | None:
        """Entry for a date, or None if never saved."""
        ...
