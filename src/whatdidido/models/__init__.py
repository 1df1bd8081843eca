"""
whatdidido.models
Pydantic models for recorded activity, the persisted history and daily reports.
Contents:
- Entry: One recorded activity (content, working directory, timestamp).
- History: The ordered, capped list of entries as persisted on disk.
- Summary: Aggregated usage for a single day.
"""

from .history import Entry, History  # noqa: F401
from .summary import Summary  # noqa: F401

__all__ = ["Entry", "History", "Summary"]
