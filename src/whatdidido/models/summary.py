# region Imports
from datetime import date

from pydantic import BaseModel, Field

from .history import Entry

# endregion
# region Pydantic Models


class Summary(BaseModel):
    """
    Pydantic model representing one day's usage report.

    Attributes:
        day (date): The calendar day the report covers (local time).
        total_entries (int): Number of entries recorded that day.
        unique_entries (list[Entry]): The day's entries with later duplicates removed.
        command_counts (dict[str, int]): Raw occurrences per command, first-seen order.
        directory_counts (dict[str, int]): Raw occurrences per working directory.
        most_used_command (str): The command with the highest count.
        most_used_count (int): How often the most used command occurred.
    """

    day: date = Field(..., description="The calendar day the report covers")
    total_entries: int = Field(..., description="Number of entries recorded that day")
    unique_entries: list[Entry] = Field(
        default_factory=list,
        description="Entries for the day, first occurrence of each content only",
    )
    command_counts: dict[str, int] = Field(
        default_factory=dict, description="Raw occurrence count per command"
    )
    directory_counts: dict[str, int] = Field(
        default_factory=dict, description="Raw occurrence count per working directory"
    )
    most_used_command: str = Field(..., description="The most used command")
    most_used_count: int = Field(
        ..., description="Occurrences of the most used command"
    )


# endregion

__all__ = ["Summary"]
