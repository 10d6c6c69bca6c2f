"""Clock adapters."""

from datetime import date, datetime, time, tzinfo
from zoneinfo import ZoneInfo


class SystemClock:
    """Host clock. Implements Clock protocol."""

    def __init__(self, timezone: str | None = None):
        self.tz: tzinfo | None = ZoneInfo(timezone) if timezone else None

    def now(self) -> datetime:
        if self.tz is None:
            return datetime.now().astimezone()
        return datetime.now(self.tz)


class FixedClock:
    """Clock pinned to one instant, for tests and replays."""

    def __init__(self, instant: datetime | date):
        if not isinstance(instant, datetime):
            instant = datetime.combine(instant, time(12, 0))
        if instant.tzinfo is None:
            instant = instant.astimezone()
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
