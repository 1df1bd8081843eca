# region Docstring
"""
whatdidido.errors
Exception hierarchy for the activity logger.
Contents:
- WhatDidIDoError: Root of every error raised by this package.
- StoreError: Base for failures of the history store; carries the offending path.
    - LockError: The history lock was not acquired within the configured timeout.
    - HistoryIOError: Reading, writing or renaming a file failed.
    - FormatError: The persisted history could not be parsed or validated.
Design Notes:
- Store methods wrap OSError / JSON / validation errors with `raise ... from e`, so the
    original exception stays available on `__cause__`.
- The CLI catches WhatDidIDoError, prints it once and exits with status 1.
"""
# endregion
# region Imports
from pathlib import Path
from typing import Optional

# endregion
# region Exceptions


class WhatDidIDoError(Exception):
    """Base exception for whatdidido errors."""

    pass


class StoreError(WhatDidIDoError):
    """Base exception for history store errors."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class LockError(StoreError):
    """Raised when the history lock cannot be acquired in time."""

    pass


class HistoryIOError(StoreError):
    """Raised when a history or import source file cannot be read or written."""

    pass


class FormatError(StoreError):
    """Raised when the history file contains corrupt or unparseable data."""

    pass


# endregion

__all__ = [
    "WhatDidIDoError",
    "StoreError",
    "LockError",
    "HistoryIOError",
    "FormatError",
]
