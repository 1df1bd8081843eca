# region Imports

from typing import Optional

from pydantic import BaseModel, Field

from whatdidido.models import Entry

# endregion
# region Pydantic Models


class RecordResult(BaseModel):
    """
    Pydantic model representing the outcome of recording an entry.
    Attributes:
        recorded (bool): False when the content repeated the most recent entry.
        total (int): Number of entries in the history after the operation.
        entry (Optional[Entry]): The stored entry, None for a duplicate.
    """

    recorded: bool = Field(
        ..., description="False when the entry duplicated the most recent one"
    )
    total: int = Field(..., description="Entry count after the operation")
    entry: Optional[Entry] = Field(None, description="The stored entry, if any")

    @property
    def duplicate(self) -> bool:
        return not self.recorded


class ImportResult(BaseModel):
    """
    Pydantic model representing the outcome of a shell history import.
    Attributes:
        considered (int): Lines examined after applying the limit.
        imported (int): Lines that produced a new entry.
        duplicates (int): Lines suppressed by most-recent-only dedup.
    """

    considered: int = Field(0, description="Lines examined after applying the limit")
    imported: int = Field(0, description="Lines that produced a new entry")
    duplicates: int = Field(0, description="Lines suppressed as duplicates")


# endregion
