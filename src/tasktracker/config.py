"""Configuration models for tasktracker."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """Where tasks are persisted."""

    path: str = "tasks.txt"


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: str | None = None


class TrackerConfig(BaseModel):
    """Main configuration for tasktracker."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TrackerConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)


# Default locations, relative to the working directory
TRACKER_DIR = Path(".tasktracker")
CONFIG_FILE = TRACKER_DIR / "config.json"
TASKS_FILE = Path("tasks.txt")
