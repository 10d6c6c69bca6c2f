"""Functional core - pure journal logic with no I/O."""

from .entries import JournalEntry, format_timestamp, parse_date, parse_timestamp, validate_content
from .errors import (
    DuplicateEntryError,
    EditNotAllowedError,
    JournalError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from .history import format_entry_date, preview, sort_newest_first
from .policy import DayState, can_edit, can_write, derive_state, find_by_date

__all__ = [
    # Entries
    "JournalEntry",
    "format_timestamp",
    "parse_date",
    "parse_timestamp",
    "validate_content",
    # Errors
    "JournalError",
    "PersistenceError",
    "NotFoundError",
    "ValidationError",
    "DuplicateEntryError",
    "EditNotAllowedError",
    # Policy
    "DayState",
    "can_edit",
    "can_write",
    "derive_state",
    "find_by_date",
    # History
    "format_entry_date",
    "preview",
    "sort_newest_first",
]
