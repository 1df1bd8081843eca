"""
whatdidido.config
Configuration and settings management for the activity logger.
Overview:
- Provides the Pydantic-based settings class consumed by the store, the services and
    the CLI.
- The settings object is constructed once per process (see get_settings) and passed
    explicitly to the components that need paths or limits.
Contents:
- Imports:
    - FactoryBaseSettings: Base settings class with multi-source loading.
    - get_settings: Factory function for retrieving settings instances (exported).
    - AppDirs / DATA_DIR / CONFIG_DIR: Platform directory resolution.
- Settings Classes:
    - HistorySettings:
        Storage root, history file name, retention cap, lock timeout, import and list
        limits, shell history location and log level. Provides derived paths for the
        history file, the lock file and the log directory.
Design Notes:
- All fields use Pydantic Field aliases so they can be overridden by environment
    variables (e.g., WHATDIDIDO_DATA_DIR, WHATDIDIDO_MAX_ENTRIES).
- Defaults are provided for every field so the tool runs with zero configuration.
- The data directory default is resolved at instantiation time, so XDG_DATA_HOME is
    honoured even if it changes after import.
"""

import os
from pathlib import Path

from pydantic import Field, field_validator

from whatdidido.config.base import CONFIG_DIR, DATA_DIR, AppDirs  # noqa: F401
from whatdidido.config.factory import FactoryBaseSettings
from whatdidido.config.factory import get_settings  # noqa: F401  This is used externally
from whatdidido.constants import (
    DEFAULT_HISTORY_FILE_NAME,
    DEFAULT_IMPORT_LIMIT,
    DEFAULT_LIST_LIMIT,
    DEFAULT_LOCK_TIMEOUT,
    LOCK_SUFFIX,
    MAX_ENTRIES,
)


class HistorySettings(FactoryBaseSettings):
    """
    History store and CLI configuration settings.
    """

    data_dir: Path = Field(
        default_factory=AppDirs.data_dir,
        alias="WHATDIDIDO_DATA_DIR",
        description="Root directory for the history file, lock file and logs.",
    )
    history_file_name: str = Field(
        default=DEFAULT_HISTORY_FILE_NAME,
        alias="WHATDIDIDO_HISTORY_FILE",
        description="File name of the JSON history inside the data directory.",
    )
    max_entries: int = Field(
        default=MAX_ENTRIES,
        ge=1,
        alias="WHATDIDIDO_MAX_ENTRIES",
        description="Maximum number of entries retained in the history file.",
    )
    lock_timeout: float = Field(
        default=DEFAULT_LOCK_TIMEOUT,
        gt=0,
        alias="WHATDIDIDO_LOCK_TIMEOUT",
        description="Seconds to wait for the history lock before giving up.",
    )
    import_limit: int = Field(
        default=DEFAULT_IMPORT_LIMIT,
        ge=1,
        alias="WHATDIDIDO_IMPORT_LIMIT",
        description="Number of trailing shell history lines considered by sync.",
    )
    list_limit: int = Field(
        default=DEFAULT_LIST_LIMIT,
        ge=1,
        alias="WHATDIDIDO_LIST_LIMIT",
        description="Number of entries shown by the list command.",
    )
    shell_history_path: Path = Field(
        default_factory=lambda: Path.home() / ".zsh_history",
        alias="WHATDIDIDO_SHELL_HISTORY",
        description="Shell history file read by the sync command.",
    )
    log_level: str = Field(
        default="warning",
        alias="WHATDIDIDO_LOG_LEVEL",
        description="Log level for the console and file handlers.",
    )

    @property
    def history_path(self) -> Path:
        """Path to the JSON history file."""
        return self.data_dir / self.history_file_name

    @property
    def lock_path(self) -> Path:
        """Path to the advisory lock file (history path plus suffix)."""
        return self.history_path.with_name(self.history_path.name + LOCK_SUFFIX)

    @property
    def logs_dir(self) -> Path:
        """Base directory for logs."""
        return self.data_dir / "logs"

    def ensure_data_dir(self) -> Path:
        """Create the data directory with owner-only permissions if it is missing."""
        if not self.data_dir.exists():
            self.data_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
        return self.data_dir

    @field_validator("data_dir", "shell_history_path", mode="before")
    def expand_user(cls, v):
        if isinstance(v, (str, os.PathLike)):
            return Path(v).expanduser()
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return v.lower()


__all__ = [
    "AppDirs",
    "CONFIG_DIR",
    "DATA_DIR",
    "FactoryBaseSettings",
    "HistorySettings",
    "get_settings",
]
