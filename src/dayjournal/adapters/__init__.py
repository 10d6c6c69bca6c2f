"""Adapters - I/O implementations of ports."""

from .clock import FixedClock, SystemClock
from .drafts import DraftStore
from .json_store import JsonEntryStore

__all__ = [
    "DraftStore",
    "FixedClock",
    "JsonEntryStore",
    "SystemClock",
]
