"""Configuration for Wins & Losses.

Settings are read from ``~/.config/winsandlosses/config.toml``. The
``WINSANDLOSSES_CONFIG`` environment variable points at another file.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from winsandlosses.engine.dates import WeekPolicy

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "winsandlosses"
DEFAULT_DB_PATH = CONFIG_DIR / "journal.db"


class StorageSettings(BaseModel):
    db_path: Path = Field(default=DEFAULT_DB_PATH, description="SQLite database file")

    @field_validator("db_path")
    @classmethod
    def _expand_user(cls, v: Path) -> Path:
        return v.expanduser()


class JournalSettings(BaseModel):
    week_policy: WeekPolicy = Field(default=WeekPolicy.CALENDAR, description="calendar or rolling")
    recent_limit: int = Field(default=3, ge=0, description="Entries shown as recent")


class LoggingSettings(BaseModel):
    level: str = Field(default="WARNING", description="Log level name")

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseModel):
    """All configurable settings."""

    storage: StorageSettings = Field(default_factory=StorageSettings)
    journal: JournalSettings = Field(default_factory=JournalSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def config_path() -> Path:
    """Location of the config file."""
    override = os.environ.get("WINSANDLOSSES_CONFIG")
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "config.toml"


def load_config(path: Optional[Path] = None) -> Settings:
    """Load settings, falling back to defaults.

    A missing, unreadable or invalid file yields default settings.

    Args:
        path: Config file to read. Defaults to ``config_path()``.
    """
    import toml

    path = path or config_path()
    if not path.exists():
        return Settings()

    try:
        return Settings.model_validate(toml.load(path))
    except (OSError, toml.TomlDecodeError, ValidationError) as e:
        logger.warning("Ignoring invalid config %s: %s", path, e)
        return Settings()


def create_template_config(path: Optional[Path] = None) -> Path:
    """Write a template configuration file.

    Returns:
        Path of the written file.
    """
    import toml

    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    template = {
        "storage": {
            "db_path": str(DEFAULT_DB_PATH),
        },
        "journal": {
            "week_policy": WeekPolicy.CALENDAR.value,  # calendar or rolling
            "recent_limit": 3,
        },
        "logging": {
            "level": "WARNING",
        },
    }

    with open(path, "w") as f:
        toml.dump(template, f)

    return path
