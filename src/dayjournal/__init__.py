"""DayJournal - one journal entry per day."""

__version__ = "0.1.0"
