# region Docstring
"""
whatdidido.config.base

Platform directory resolution for the activity logger.

Overview:
- Provides a utility class for resolving where whatdidido keeps its data
    (history file, lock file, logs) and where it looks for optional
    configuration files.
- Exposes module-level constants for the resolved default directories.

Contents:
- Classes:
    - AppDirs:
        Class methods resolving the data directory and the config directory
        following the XDG base directory conventions, with a home-directory
        fallback.

- Module-level Constants:
    - APP_NAME (str): Directory name used under the data and config roots.
    - DATA_DIR (Path): Default data directory.
    - CONFIG_DIR (Path): Directory searched for `config.yaml` and `.env`.

Resolution Logic:
- Priority 1: The XDG_DATA_HOME / XDG_CONFIG_HOME environment variables.
- Priority 2: `~/.local/share` / `~/.config` under the user's home directory.
- The explicit WHATDIDIDO_DATA_DIR override is handled by the settings layer,
    not here.

Design Notes:
- Nothing is created on disk at import time; directories are created on
    demand by `HistorySettings.ensure_data_dir()`.
"""
# endregion
# region Imports
import os
from pathlib import Path

# endregion
# region AppDirs Class

APP_NAME = "whatdidido"


class AppDirs:
    """
    Platform directory resolution utility.

    Attributes:
        NAME (str): The application directory name.
    """

    NAME: str = APP_NAME

    @classmethod
    def data_dir(cls) -> Path:
        """Get the default data directory."""
        xdg_data_home = os.getenv("XDG_DATA_HOME")
        if xdg_data_home:
            return Path(xdg_data_home).expanduser() / cls.NAME
        return Path.home() / ".local" / "share" / cls.NAME

    @classmethod
    def config_dir(cls) -> Path:
        """Get the directory holding optional config files."""
        xdg_config_home = os.getenv("XDG_CONFIG_HOME")
        if xdg_config_home:
            return Path(xdg_config_home).expanduser() / cls.NAME
        return Path.home() / ".config" / cls.NAME


# endregion
# region Module-level Constants

DATA_DIR: Path = AppDirs.data_dir()
"""[Path] Default data directory."""
CONFIG_DIR: Path = AppDirs.config_dir()
"""[Path] Directory searched for config.yaml and .env files."""
# endregion


__all__ = [
    "APP_NAME",
    "CONFIG_DIR",
    "DATA_DIR",
    "AppDirs",
]
