# region Docstring
"""
whatdidido.store
Locked, atomic persistence of the history file.
Overview:
- Provides the HistoryStore, the only component that touches the history file and
    its lock file.
- Every operation takes an exclusive cross-process advisory lock (flock) on
    `<history-path>.lock` and releases it on every path, including errors.
- Writes go to a temporary file in the same directory which is fsynced and then
    renamed over the history file, so a reader never sees a half-written document.
Contents:
- Classes:
    - HistoryStore:
        - load() -> History:
            Reads the history under the lock. Missing or empty file means no entries.
        - save(history) -> None:
            Truncates to `max_entries` (dropping the oldest), then writes atomically
            under the lock.
        - session() -> ContextManager[History]:
            Holds the lock across load, caller mutation and save. Nothing is
            written if the body leaves the history unchanged, and changes are
            discarded if the body raises.
        - lock() -> ContextManager[None]:
            Bounded acquisition of the lock; raises LockError on timeout.
Design Notes:
- load() and save() each take their own lock. A caller doing load() then save()
    can lose a concurrent writer's update; use session() for read-modify-write.
- flock locks belong to the open file description, so session() reads and writes
    through the unlocked helpers instead of calling load()/save() again.
- POSIX only (fcntl).
"""
# endregion
# region Imports
import fcntl
import os
import tempfile
import time
from contextlib import contextmanager
from logging import Logger as T_Logger
from pathlib import Path
from typing import Iterator, Optional

from pydantic import ValidationError

from whatdidido.config import HistorySettings
from whatdidido.constants import FILE_MODE, LOCK_POLL_INTERVAL
from whatdidido.errors import FormatError, HistoryIOError, LockError
from whatdidido.logger import logger as _logger
from whatdidido.models import History

# endregion
# region HistoryStore


class HistoryStore:
    __settings: HistorySettings
    __logger: T_Logger

    def __init__(
        self, settings: HistorySettings, logger: Optional[T_Logger] = None
    ) -> None:
        self.__settings = settings
        self.__logger = (logger or _logger).getChild(self.__class__.__name__)

    @property
    def settings(self) -> HistorySettings:
        return self.__settings

    @property
    def history_path(self) -> Path:
        return self.__settings.history_path

    @property
    def lock_path(self) -> Path:
        return self.__settings.lock_path

    # region Locking
    @contextmanager
    def lock(self) -> Iterator[None]:
        """
        Acquire the exclusive history lock, waiting at most `lock_timeout` seconds.

        Raises:
            HistoryIOError: If the lock file cannot be created or opened.
            LockError: If the lock is still held elsewhere when the timeout expires.
        """
        try:
            self.__settings.ensure_data_dir()
            fd = os.open(self.lock_path, os.O_RDWR | os.O_CREAT, FILE_MODE)
        except OSError as e:
            self.__logger.error("Cannot open lock file %s: %s", self.lock_path, e)
            raise HistoryIOError(
                f"Cannot open lock file {self.lock_path}: {e}", path=self.lock_path
            ) from e

        try:
            self._acquire(fd)
            try:
                yield
            finally:
                fcntl.flock(fd, fcntl.LOCK_UN)
        finally:
            os.close(fd)

    def _acquire(self, fd: int) -> None:
        timeout = self.__settings.lock_timeout
        deadline = time.monotonic() + timeout
        while True:
            try:
                fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
                return
            except BlockingIOError as e:
                if time.monotonic() >= deadline:
                    self.__logger.warning(
                        "Timed out after %.2fs waiting for %s", timeout, self.lock_path
                    )
                    raise LockError(
                        f"Could not lock {self.lock_path} within {timeout:g} seconds",
                        path=self.lock_path,
                    ) from e
                time.sleep(LOCK_POLL_INTERVAL)
            except OSError as e:
                raise LockError(
                    f"Could not lock {self.lock_path}: {e}", path=self.lock_path
                ) from e

    # endregion
    # region Public API
    def load(self) -> History:
        """
        Load the history under the lock.

        Returns:
            History: The persisted history, or an empty one if the file is missing.

        Raises:
            LockError, HistoryIOError, FormatError
        """
        with self.lock():
            return self._read()

    def save(self, history: History) -> None:
        """
        Persist the history under the lock, truncating it to `max_entries` first.

        The passed history is truncated in place.

        Raises:
            LockError, HistoryIOError
        """
        with self.lock():
            self._write(history)

    @contextmanager
    def session(self) -> Iterator[History]:
        """
        Hold the lock across a full read-modify-write cycle.

        Example:
            >>> with store.session() as history:
            ...     history.append(entry)
        """
        with self.lock():
            history = self._read()
            snapshot = history.model_dump()
            yield history
            if (
                history.model_dump() == snapshot
                and len(history.entries) <= self.__settings.max_entries
            ):
                self.__logger.debug("History unchanged, skipping write.")
                return
            self._write(history)

    # endregion
    # region Unlocked helpers
    def _read(self) -> History:
        path = self.history_path
        if not path.exists():
            self.__logger.debug("No history file at %s, starting empty.", path)
            return History()
        try:
            data = path.read_bytes()
        except OSError as e:
            self.__logger.error("Failed to read %s: %s", path, e)
            raise HistoryIOError(f"Failed to read {path}: {e}", path=path) from e
        try:
            raw = data.decode("utf-8")
        except UnicodeDecodeError as e:
            self.__logger.error("History file %s is not UTF-8: %s", path, e)
            raise FormatError(
                f"History file {path} is corrupt: not valid UTF-8", path=path
            ) from e
        if not raw.strip():
            return History()
        try:
            return History.model_validate_json(raw)
        except ValidationError as e:
            self.__logger.error("Corrupt history file %s: %s", path, e)
            raise FormatError(
                f"History file {path} is corrupt: {e.error_count()} error(s)",
                path=path,
            ) from e

    def _write(self, history: History) -> None:
        path = self.history_path
        dropped = history.truncate(self.__settings.max_entries)
        if dropped:
            self.__logger.debug("Dropped %d oldest entries.", dropped)
        payload = history.to_json()

        tmp_path: Optional[Path] = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_path = Path(handle.name)
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, path)
        except OSError as e:
            self.__logger.error("Failed to write %s: %s", path, e)
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise HistoryIOError(f"Failed to write {path}: {e}", path=path) from e
        self.__logger.debug("Saved %d entries to %s.", len(history.entries), path)

    # endregion


# endregion

__all__ = ["HistoryStore"]
