"""
whatdidido.services
Recording, aggregation and import services built on the history store.
Contents:
- LogService: record / recent / entries_for_day / summarize_today and the pure
    aggregation helpers.
- HistoryImporter: imports the tail of a shell history file.
- RecordResult, ImportResult: operation outcomes.
"""

from .history_importer import HistoryImporter, extract_command  # noqa: F401
from .log_service import LogService  # noqa: F401
from .models import ImportResult, RecordResult  # noqa: F401

__all__ = [
    "HistoryImporter",
    "ImportResult",
    "LogService",
    "RecordResult",
    "extract_command",
]
