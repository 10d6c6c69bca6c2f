"""Journal service - the boundary the CLI talks to.

Boundary operations (list_entries, save_entry, update_entry, get_entry_by_date,
can_write_today, get_today_entry) never raise on journal failures: they log and
return a failed result. The write_today/edit_today variants raise so callers
can report the reason.
"""

import logging
from dataclasses import replace
from datetime import date

from .adapters.clock import SystemClock
from .adapters.json_store import JsonEntryStore
from .config import Config
from .core.entries import JournalEntry, parse_date, validate_content
from .core.errors import (
    DuplicateEntryError,
    EditNotAllowedError,
    JournalError,
    NotFoundError,
)
from .core.history import sort_newest_first
from .core.policy import DayState, can_edit, derive_state
from .ports.clock import Clock
from .ports.entry_store import EntryStore

logger = logging.getLogger(__name__)


class DailyJournal:
    """Daily-write policy over an entry store."""

    def __init__(self, store: EntryStore, clock: Clock):
        self.store = store
        self.clock = clock

    def today(self) -> date:
        """Local calendar date of the clock's current instant."""
        return self.clock.now().date()

    # ============== Raising operations ==============

    def write_today(self, content: str) -> JournalEntry:
        """Create today's entry."""
        entry = JournalEntry(
            date=self.today(),
            content=validate_content(content),
            timestamp=self.clock.now(),
        )
        self._append(entry)
        return entry

    def edit_today(self, content: str) -> JournalEntry:
        """Replace today's content and refresh its timestamp."""
        entry = JournalEntry(
            date=self.today(),
            content=validate_content(content),
            timestamp=self.clock.now(),
        )
        self._update(entry)
        return entry

    def entry_for(self, target_date: date | str) -> JournalEntry | None:
        """Entry for a date, or None. Storage failures propagate."""
        return self.store.find_by_date(parse_date(target_date))

    def state_for(self, selected: date | str) -> DayState:
        """State of a selected date for display."""
        selected = parse_date(selected)
        today = self.today()
        entry = self.store.find_by_date(today) if selected == today else None
        return derive_state(selected, today, entry)

    def history(self) -> list[JournalEntry]:
        """All entries, newest first."""
        return sort_newest_first(self.store.list_entries())

    def _append(self, entry: JournalEntry) -> None:
        entry = replace(entry, content=validate_content(entry.content))
        if self.store.find_by_date(entry.date) is not None:
            raise DuplicateEntryError(f"An entry for {entry.date} already exists")
        self.store.append_entry(entry)
        logger.info(f"Saved entry for {entry.date}")

    def _update(self, entry: JournalEntry) -> None:
        entry = replace(entry, content=validate_content(entry.content))
        if self.store.find_by_date(entry.date) is None:
            raise NotFoundError(f"No entry for {entry.date}")
        if not can_edit(entry, self.today()):
            raise EditNotAllowedError(f"Entry for {entry.date} is view-only")
        self.store.update_entry(entry)
        logger.info(f"Updated entry for {entry.date}")

    # ============== Boundary operations ==============

    def list_entries(self) -> list[JournalEntry]:
        try:
            return self.store.list_entries()
        except JournalError as e:
            logger.warning(f"Failed to load journal entries: {e}")
            return []

    def save_entry(self, entry: JournalEntry) -> bool:
        try:
            self._append(entry)
        except JournalError as e:
            logger.warning(f"Failed to save entry: {e}")
            return False
        return True

    def update_entry(self, entry: JournalEntry) -> bool:
        try:
            self._update(entry)
        except JournalError as e:
            logger.warning(f"Failed to update entry: {e}")
            return False
        return True

    def get_entry_by_date(self, target_date: date | str) -> JournalEntry | None:
        try:
            return self.store.find_by_date(parse_date(target_date))
        except JournalError as e:
            logger.warning(f"Failed to load entry for {target_date}: {e}")
            return None

    def can_write_today(self) -> bool:
        """True iff no entry exists for today. False when storage is unreadable."""
        try:
            return self.store.find_by_date(self.today()) is None
        except JournalError as e:
            logger.warning(f"Failed to check today's status: {e}")
            return False

    def get_today_entry(self) -> JournalEntry | None:
        return self.get_entry_by_date(self.today())


def get_journal(config: Config) -> DailyJournal:
    """Build the journal from config."""
    store = JsonEntryStore(config.data_path, namespace=config.namespace)
    clock = SystemClock(config.timezone or None)
    return DailyJournal(store, clock)
