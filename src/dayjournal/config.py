"""Configuration management for DayJournal."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DAYJOURNAL_HOME = Path(os.environ.get("DAYJOURNAL_HOME", Path.home() / "dayjournal"))
CONFIG_FILE = DAYJOURNAL_HOME / "config" / "dayjournal.conf"
DATA_DIR = DAYJOURNAL_HOME / "data"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """DayJournal configuration."""

    data_file: str = ""
    draft_file: str = ""
    namespace: str = "journalEntries"
    timezone: str = ""  # Empty = system local zone
    preview_length: int = 100
    log_level: str = "WARNING"

    @property
    def data_path(self) -> Path:
        if self.data_file:
            return Path(self.data_file).expanduser()
        return DATA_DIR / "journal.json"

    @property
    def draft_path(self) -> Path:
        if self.draft_file:
            return Path(self.draft_file).expanduser()
        return DATA_DIR / "draft.txt"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from dayjournal.conf."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "draft_file":
                config.draft_file = value
            case "namespace":
                if value:
                    config.namespace = value
            case "timezone":
                if not value:
                    continue
                try:
                    ZoneInfo(value)
                except (ZoneInfoNotFoundError, ValueError):
                    logger.warning(f"Unknown TIMEZONE {value!r}, using system zone")
                    continue
                config.timezone = value
            case "preview_length":
                try:
                    config.preview_length = max(1, int(value))
                except ValueError:
                    logger.warning(f"Invalid PREVIEW_LENGTH {value!r}, keeping {config.preview_length}")
            case "log_level":
                level = value.upper()
                if level in LOG_LEVELS:
                    config.log_level = level
                else:
                    logger.warning(f"Invalid LOG_LEVEL {value!r}, keeping {config.log_level}")

    return config
