# region Docstring
"""
whatdidido.services.history_importer
Service for importing recent shell history lines into the activity log.
Overview:
    - Treats the shell history file as plain text with one record per line.
    - A `;` splits a timestamp-like prefix from the command, as in zsh extended
      history (`: 1700000000:0;git status`); lines without one are used verbatim.
Contents:
    - Functions:
        - extract_command(line) -> str
    - Services:
        - HistoryImporter:
            - import_recent(lines, limit) -> ImportResult:
                Records the commands of the last `limit` non-blank lines, in order.
            - import_file(path=None, limit=None) -> ImportResult:
                Reads a history file and delegates to import_recent.
Design Notes:
    - Entries are recorded one at a time through LogService.record with no working
      directory, so consecutive identical commands collapse through its
      most-recent-only dedup and are counted as duplicates.
    - An unreadable source raises HistoryIOError; store errors propagate unchanged.
"""

# endregion
# region Imports
from logging import Logger as T_Logger
from pathlib import Path
from typing import Iterable, Optional

from whatdidido.constants import COMMAND_SEPARATOR, DEFAULT_IMPORT_LIMIT
from whatdidido.errors import HistoryIOError
from whatdidido.logger import logger as _logger

from .log_service import LogService
from .models import ImportResult

# endregion
# region Helpers


def extract_command(line: str) -> str:
    """
    Extract the command portion of a history line.

    Arguments:
        line (str): A raw history line.

    Returns:
        str: Everything after the first ";" or the whole line when there is none.

    Example:
        >>> extract_command("2024-01-01 10:00;git status")
        'git status'
        >>> extract_command(": 1700000000:0;ls -la")
        'ls -la'
        >>> extract_command("make test")
        'make test'
    """
    line = line.rstrip("\r\n")
    _, separator, command = line.partition(COMMAND_SEPARATOR)
    return command if separator else line


# endregion
# region History Importer Service


class HistoryImporter:
    __service: LogService
    __logger: T_Logger

    def __init__(self, service: LogService, logger: Optional[T_Logger] = None) -> None:
        self.__service = service
        self.__logger = (logger or _logger).getChild(self.__class__.__name__)

    def import_recent(
        self, lines: Iterable[str], limit: int = DEFAULT_IMPORT_LIMIT
    ) -> ImportResult:
        """
        Imports the last `limit` non-blank lines.

        Arguments:
            lines (Iterable[str]): History lines, oldest first.
            limit (int): Maximum number of trailing lines to consider.

        Returns:
            ImportResult: Counts of considered, imported and duplicate lines.

        Raises:
            StoreError: If the history cannot be locked, read or written.
        """
        non_blank = [line for line in lines if line.strip()]
        selected = non_blank[-limit:] if limit > 0 else []
        result = ImportResult(considered=len(selected))

        for line in selected:
            command = extract_command(line)
            if not command.strip():
                continue
            if self.__service.record(command).recorded:
                result.imported += 1
            else:
                result.duplicates += 1

        self.__logger.info(
            "Imported %d of %d lines (%d duplicates).",
            result.imported,
            result.considered,
            result.duplicates,
        )
        return result

    def import_file(
        self, path: Optional[Path] = None, limit: Optional[int] = None
    ) -> ImportResult:
        """
        Imports the tail of a shell history file.

        Arguments:
            path (Optional[Path]): History file; defaults to the configured one.
            limit (Optional[int]): Lines to consider; defaults to `import_limit`.

        Raises:
            HistoryIOError: If the file is missing or unreadable.
        """
        settings = self.__service.store.settings
        path = Path(path) if path is not None else settings.shell_history_path
        limit = limit if limit is not None else settings.import_limit

        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            self.__logger.error("Cannot read shell history %s: %s", path, e)
            raise HistoryIOError(
                f"Error reading shell history {path}: {e}", path=path
            ) from e

        return self.import_recent(text.splitlines(), limit=limit)


# endregion

__all__ = ["HistoryImporter", "extract_command"]
