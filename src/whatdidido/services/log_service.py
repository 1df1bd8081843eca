# region Docstring
"""
whatdidido.services.log_service
Recording and read-side aggregation on top of the history store.
Overview:
    - Provides the LogService used by the CLI and the shell history importer to
      record entries and to build lists and daily usage reports.
Contents:
    - Services:
        - LogService:
            - record(content, working_directory) -> RecordResult:
                Appends an entry unless it repeats the most recent one.
            - recent(n) -> list[Entry]:
                The last n entries, oldest first.
            - entries_for_day(day, entries=None) -> list[Entry]:
                Entries recorded on a local calendar day.
            - summarize_today() -> Optional[Summary]:
                Today's report, or None when nothing was recorded today.
        - Aggregation helpers (static, pure):
            deduplicate_by_content, command_frequencies, directory_frequencies,
            most_frequent.
Design Notes:
    - record() runs inside HistoryStore.session(), so the lock covers the whole
      load/append/save cycle.
    - Store errors are not caught here; an empty history and a failed load are
      always distinguishable by the caller.
    - Frequency maps keep first-occurrence key order, which makes the most_frequent
      tie-break deterministic: on equal counts the command recorded first wins.
"""

# endregion
# region Imports
from datetime import date, datetime
from logging import Logger as T_Logger
from typing import Callable, Iterable, Optional

from whatdidido.constants import UNKNOWN_DIRECTORY
from whatdidido.logger import logger as _logger
from whatdidido.models import Entry, Summary
from whatdidido.store import HistoryStore
from whatdidido.utils import get_time, to_local

from .models import RecordResult

# endregion
# region Log Service


class LogService:
    __store: HistoryStore
    __logger: T_Logger

    def __init__(
        self,
        store: HistoryStore,
        logger: Optional[T_Logger] = None,
        clock: Callable[[], datetime] = get_time,
    ) -> None:
        self.__store = store
        self.__logger = (logger or _logger).getChild(self.__class__.__name__)
        self.__clock = clock

    @property
    def store(self) -> HistoryStore:
        return self.__store

    def record(self, content: str, working_directory: str = "") -> RecordResult:
        """
        Records an entry unless its content repeats the most recent entry.

        Arguments:
            content (str): The command or clipboard text.
            working_directory (str): Where it happened; "" when unknown.

        Returns:
            RecordResult: `recorded=False` for a duplicate, otherwise the stored
            entry and the new total.

        Raises:
            ValueError: If content is empty or whitespace only.
            StoreError: If the history cannot be locked, read or written.
        """
        if not content or not content.strip():
            raise ValueError("Cannot record empty content")

        with self.__store.session() as history:
            last = history.last
            if last is not None and last.content == content:
                self.__logger.info("Skipping duplicate of most recent entry.")
                return RecordResult(recorded=False, total=len(history.entries))

            timestamp = self.__clock()
            # Keep timestamps non-decreasing if the clock stepped backwards.
            if last is not None and timestamp < last.timestamp:
                timestamp = last.timestamp

            entry = Entry(
                content=content,
                working_directory=working_directory or "",
                timestamp=timestamp,
            )
            history.append(entry)
            max_entries = self.__store.settings.max_entries
            total = min(len(history.entries), max_entries)

        self.__logger.info("Recorded entry #%d.", total)
        return RecordResult(recorded=True, total=total, entry=entry)

    def recent(self, n: int) -> list[Entry]:
        """Return the last `min(n, len)` entries, oldest first."""
        return self.__store.load().tail(n)

    def entries_for_day(
        self, day: date, entries: Optional[Iterable[Entry]] = None
    ) -> list[Entry]:
        """
        Return the entries whose local-time timestamp falls on `day`, in order.

        Loads the history when `entries` is not given.
        """
        if entries is None:
            entries = self.__store.load().entries
        return [entry for entry in entries if to_local(entry.timestamp).date() == day]

    def summarize_today(self) -> Optional[Summary]:
        """
        Build today's usage report.

        Returns:
            Optional[Summary]: None when no entries were recorded today.
        """
        today = to_local(self.__clock()).date()
        todays_entries = self.entries_for_day(today)
        if not todays_entries:
            self.__logger.info("No activity for %s.", today.isoformat())
            return None

        command_counts = self.command_frequencies(todays_entries)
        most_used_command, most_used_count = self.most_frequent(command_counts)
        return Summary(
            day=today,
            total_entries=len(todays_entries),
            unique_entries=self.deduplicate_by_content(todays_entries),
            command_counts=command_counts,
            directory_counts=self.directory_frequencies(todays_entries),
            most_used_command=most_used_command,
            most_used_count=most_used_count,
        )

    # region Aggregation helpers
    @staticmethod
    def deduplicate_by_content(entries: Iterable[Entry]) -> list[Entry]:
        """Keep the first entry seen for each distinct content, preserving order."""
        seen: set[str] = set()
        unique: list[Entry] = []
        for entry in entries:
            if entry.content in seen:
                continue
            seen.add(entry.content)
            unique.append(entry)
        return unique

    @staticmethod
    def command_frequencies(entries: Iterable[Entry]) -> dict[str, int]:
        """Count raw occurrences of each content value."""
        counts: dict[str, int] = {}
        for entry in entries:
            counts[entry.content] = counts.get(entry.content, 0) + 1
        return counts

    @staticmethod
    def directory_frequencies(entries: Iterable[Entry]) -> dict[str, int]:
        """Count raw occurrences per working directory ("Unknown" when empty)."""
        counts: dict[str, int] = {}
        for entry in entries:
            directory = entry.working_directory or UNKNOWN_DIRECTORY
            counts[directory] = counts.get(directory, 0) + 1
        return counts

    @staticmethod
    def most_frequent(freq_map: dict[str, int]) -> Optional[tuple[str, int]]:
        """
        Return the key with the strictly greatest count.

        Ties go to the key that comes first in the mapping's order. Returns None for
        an empty mapping.

        Example:
            >>> LogService.most_frequent({"ls": 3, "cd foo": 1})
            ('ls', 3)
        """
        best: Optional[tuple[str, int]] = None
        for key, count in freq_map.items():
            if best is None or count > best[1]:
                best = (key, count)
        return best

    # endregion


# endregion

__all__ = ["LogService"]
