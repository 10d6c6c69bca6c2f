"""File-based draft storage for unsaved entry text."""

import logging
from pathlib import Path

from dayjournal.core.errors import PersistenceError

logger = logging.getLogger(__name__)


class DraftStore:
    """Keeps the last unsaved entry text in a single file."""

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> str | None:
        """Saved draft text, or None if there is none."""
        if not self.path.exists():
            return None
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Cannot read draft {self.path}: {e}") from e
        return text if text.strip() else None

    def save(self, text: str) -> None:
        if not text.strip():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Cannot write draft {self.path}: {e}") from e
        logger.debug(f"Saved draft to {self.path}")

    def clear(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Cannot remove draft {self.path}: {e}") from e
