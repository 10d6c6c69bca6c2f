"""Daily-write policy - pure rules over entries and a calendar date."""

from datetime import date
from enum import Enum

from .entries import JournalEntry


class DayState(Enum):
    """What the user may do with the selected date."""

    CAN_WRITE = "can_write"  # Today, nothing written yet
    COMPLETED = "completed"  # Today, entry exists and is editable
    VIEW_ONLY = "view_only"  # Any other date


def find_by_date(entries: list[JournalEntry], target_date: date) -> JournalEntry | None:
    """First entry for a date, or None."""
    for entry in entries:
        if entry.date == target_date:
            return entry
    return None


def can_write(entries: list[JournalEntry], today: date) -> bool:
    """True iff no entry exists for today."""
    return find_by_date(entries, today) is None


def can_edit(entry: JournalEntry, today: date) -> bool:
    """Only today's entry may be mutated."""
    return entry.date == today


def derive_state(
    selected: date, today: date, entry: JournalEntry | None
) -> DayState:
    """
    Derive the state for a selected date.

    Past and future dates are always view-only, whether or not they hold an
    entry.
    """
    if selected != today:
        return DayState.VIEW_ONLY
    if entry is None:
        return DayState.CAN_WRITE
    return DayState.COMPLETED
