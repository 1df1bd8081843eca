# region Docstring
"""
whatdidido.models.history
Domain models for recorded activity and the persisted history document.
Overview:
- Provides Pydantic models mirroring the on-disk JSON layout for safe I/O,
    validation and serialization.
Contents:
- Pydantic models:
    - Entry:
        A single recorded activity: the command or clipboard text, the working
        directory it happened in (empty when unknown) and the time it was recorded.
    - History:
        The ordered, capped list of entries as persisted. Oldest entry first.
        Provides helpers to inspect the last entry, append, take the tail and
        truncate from the front.
Design notes:
- Serialization uses camelCase keys (`workingDirectory`) via serialization aliases;
    always dump with `by_alias=True`.
- Validation also accepts the capitalised layout written by earlier versions
    (`Entries`, `Content`, `WorkingDir`, `Timestamp`) and a null entry list, so older
    history files keep loading.
- Entries are never reordered; truncation only drops from the front.
"""
# endregion
# region Imports
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# endregion
# region Entry Model


class Entry(BaseModel):
    """
    Pydantic model representing one recorded activity.

    Attributes:
        content (str): The command or clipboard text.
        working_directory (str): Absolute path the entry was recorded in, or "".
        timestamp (datetime): When the entry was recorded.
    """

    content: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("content", "Content"),
        serialization_alias="content",
        description="The command or clipboard text",
    )
    working_directory: str = Field(
        "",
        validation_alias=AliasChoices(
            "workingDirectory", "working_directory", "WorkingDir"
        ),
        serialization_alias="workingDirectory",
        description="Working directory at record time (empty when unknown)",
    )
    timestamp: datetime = Field(
        ...,
        validation_alias=AliasChoices("timestamp", "Timestamp"),
        serialization_alias="timestamp",
        description="The time the entry was recorded",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "content": "git status",
                    "workingDirectory": "/home/user/src/project",
                    "timestamp": "2024-01-01T12:00:00-05:00",
                }
            ]
        },
    )

    @field_validator("content")
    def validate_content(cls, v: str) -> str:
        """Reject whitespace-only content."""
        if not v.strip():
            raise ValueError("content must contain non-whitespace characters")
        return v

    @field_validator("working_directory", mode="before")
    def validate_working_directory(cls, v):
        return "" if v is None else v

    @field_validator("timestamp")
    def validate_timestamp(cls, v: datetime) -> datetime:
        """Treat naive timestamps as local time."""
        return v.astimezone() if v.tzinfo is None else v


# endregion
# region History Model


class History(BaseModel):
    """
    Pydantic model representing the persisted history document.

    Attributes:
        entries (list[Entry]): Recorded entries, oldest first.
    """

    entries: list[Entry] = Field(
        default_factory=list,
        validation_alias=AliasChoices("entries", "Entries"),
        serialization_alias="entries",
        description="Recorded entries, oldest first",
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("entries", mode="before")
    def validate_entries(cls, v):
        return [] if v is None else v

    @property
    def last(self) -> Optional[Entry]:
        """The most recently recorded entry, if any."""
        return self.entries[-1] if self.entries else None

    def append(self, entry: Entry) -> int:
        """Append an entry and return the new entry count."""
        self.entries.append(entry)
        return len(self.entries)

    def tail(self, n: int) -> list[Entry]:
        """Return the last `n` entries in original order."""
        if n <= 0:
            return []
        return list(self.entries[-n:])

    def truncate(self, max_entries: int) -> int:
        """
        Drop the oldest entries so that at most `max_entries` remain.

        Returns:
            int: The number of entries dropped.
        """
        overflow = len(self.entries) - max_entries
        if overflow <= 0:
            return 0
        del self.entries[:overflow]
        return overflow

    def to_json(self) -> str:
        """Serialize to the human-readable on-disk JSON layout."""
        return self.model_dump_json(by_alias=True, indent=2)


# endregion

__all__ = ["Entry", "History"]
