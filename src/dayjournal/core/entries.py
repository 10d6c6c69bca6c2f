"""Journal entry model - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date, datetime, timezone

from .errors import ValidationError


def format_timestamp(instant: datetime) -> str:
    """ISO-8601 in UTC with a trailing Z."""
    if instant.tzinfo is None:
        instant = instant.astimezone()
    utc = instant.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp. Naive values are taken as UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(value: date | str) -> date:
    """Coerce a YYYY-MM-DD string (or a date) to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError) as e:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from e


def validate_content(content: str) -> str:
    """Return content stripped of surrounding whitespace, rejecting empty text."""
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("Entry content must not be empty")
    return content.strip()


@dataclass
class JournalEntry:
    """One journal record for a single calendar date."""

    date: date
    content: str
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "content": self.content,
            "timestamp": format_timestamp(self.timestamp),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JournalEntry":
        """Build an entry from its persisted mapping."""
        if not isinstance(data, dict):
            raise ValidationError(f"Entry must be a mapping, got {type(data).__name__}")
        try:
            entry_date = parse_date(data["date"])
            content = data["content"]
            timestamp = parse_timestamp(data["timestamp"])
        except KeyError as e:
            raise ValidationError(f"Entry is missing field {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Malformed entry: {e}") from e
        if not isinstance(content, str):
            raise ValidationError("Entry content must be text")
        return cls(date=entry_date, content=content, timestamp=timestamp)
