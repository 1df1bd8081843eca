# region Docstring
"""
whatdidido.constants
Shared constants for the history store, the services and the CLI.
Contents:
- Store:
    - MAX_ENTRIES: Default retention cap for the history file.
    - DEFAULT_HISTORY_FILE_NAME: File name of the JSON history.
    - LOCK_SUFFIX: Suffix appended to the history path to form the lock file path.
    - DEFAULT_LOCK_TIMEOUT / LOCK_POLL_INTERVAL: Bounded lock wait, in seconds.
    - FILE_MODE: Permission bits for the history and lock files.
- Services:
    - UNKNOWN_DIRECTORY: Key used for entries recorded without a working directory.
    - COMMAND_SEPARATOR: Separator between the prefix and the command in imported lines.
    - DEFAULT_IMPORT_LIMIT: Number of trailing lines considered by an import.
- CLI:
    - DEFAULT_LIST_LIMIT, CONTENT_DISPLAY_WIDTH, TIMESTAMP_DISPLAY_FORMAT.
"""
# endregion

# region Store
MAX_ENTRIES: int = 100
DEFAULT_HISTORY_FILE_NAME: str = "history.json"
LOCK_SUFFIX: str = ".lock"
DEFAULT_LOCK_TIMEOUT: float = 5.0
LOCK_POLL_INTERVAL: float = 0.05
FILE_MODE: int = 0o600
# endregion
# region Services
UNKNOWN_DIRECTORY: str = "Unknown"
COMMAND_SEPARATOR: str = ";"
DEFAULT_IMPORT_LIMIT: int = 50
# endregion
# region CLI
DEFAULT_LIST_LIMIT: int = 10
CONTENT_DISPLAY_WIDTH: int = 60
TIMESTAMP_DISPLAY_FORMAT: str = "%Y-%m-%d %I:%M:%S %p %A"
# endregion
