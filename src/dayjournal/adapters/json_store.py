"""JSON document storage adapter."""

import json
import logging
import os
import tempfile
from datetime import date
from pathlib import Path

from dayjournal.core.entries import JournalEntry, parse_date
from dayjournal.core.errors import NotFoundError, PersistenceError, ValidationError
from dayjournal.core.policy import find_by_date

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "journalEntries"


class JsonEntryStore:
    """
    Single-document journal storage.

    Implements EntryStore protocol. All entries live in one JSON object under
    `namespace`; the document is read fully on every call and rewritten fully
    on every mutation. Other top-level keys are preserved.
    """

    def __init__(self, path: Path | str, namespace: str = DEFAULT_NAMESPACE):
        self.path = Path(path).expanduser()
        self.namespace = namespace

    def _read_document(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Cannot read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise PersistenceError(f"{self.path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"{self.path} does not hold a JSON object")
        return data

    def _write_document(self, data: dict) -> None:
        """Atomic rewrite - temp file + fsync + rename."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".tmp_", suffix=".json")
        except OSError as e:
            raise PersistenceError(f"Cannot write {self.path}: {e}") from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(json.dumps(data, indent=2, ensure_ascii=False) + "\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise PersistenceError(f"Cannot write {self.path}: {e}") from e

    def _load(self) -> tuple[dict, list[dict]]:
        data = self._read_document()
        records = data.get(self.namespace, [])
        if not isinstance(records, list):
            raise PersistenceError(f"'{self.namespace}' in {self.path} is not a list")
        return data, records

    def _record_date(self, record) -> date:
        """Parse a record's date the same way list_entries does."""
        if not isinstance(record, dict) or "date" not in record:
            raise PersistenceError(f"Corrupt entry in {self.path}: {record!r}")
        try:
            return parse_date(record["date"])
        except ValidationError as e:
            raise PersistenceError(f"Corrupt entry in {self.path}: {e}") from e

    def list_entries(self) -> list[JournalEntry]:
        """All entries in insertion order."""
        _, records = self._load()
        try:
            return [JournalEntry.from_dict(r) for r in records]
        except ValidationError as e:
            raise PersistenceError(f"Corrupt entry in {self.path}: {e}") from e

    def append_entry(self, entry: JournalEntry) -> None:
        """Add an entry and persist before returning."""
        data, records = self._load()
        records.append(entry.to_dict())
        data[self.namespace] = records
        self._write_document(data)
        logger.debug(f"Appended entry for {entry.date} to {self.path}")

    def update_entry(self, entry: JournalEntry) -> None:
        """Replace the entry with the same date, keeping its position."""
        data, records = self._load()
        for i, record in enumerate(records):
            if self._record_date(record) == entry.date:
                records[i] = entry.to_dict()
                break
        else:
            raise NotFoundError(f"No entry for {entry.date.isoformat()}")
        data[self.namespace] = records
        self._write_document(data)
        logger.debug(f"Updated entry for {entry.date} in {self.path}")

    def find_by_date(self, target_date: date) -> JournalEntry | None:
        """Entry for a date, or None if never saved."""
        return find_by_date(self.list_entries(), target_date)
