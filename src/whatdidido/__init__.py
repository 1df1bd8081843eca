"""
whatdidido
Personal command and activity logger.

Records shell commands and snippets with the directory they ran in, keeps the
most recent ones in a locked JSON file and summarises the day's usage.
"""

from whatdidido.config import HistorySettings, get_settings  # noqa: F401
from whatdidido.errors import (  # noqa: F401
    FormatError,
    HistoryIOError,
    LockError,
    StoreError,
    WhatDidIDoError,
)
from whatdidido.models import Entry, History, Summary  # noqa: F401
from whatdidido.services import (  # noqa: F401
    HistoryImporter,
    ImportResult,
    LogService,
    RecordResult,
)
from whatdidido.store import HistoryStore  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Entry",
    "FormatError",
    "History",
    "HistoryImporter",
    "HistoryIOError",
    "HistorySettings",
    "HistoryStore",
    "ImportResult",
    "LockError",
    "LogService",
    "RecordResult",
    "StoreError",
    "Summary",
    "WhatDidIDoError",
    "get_settings",
]
