# region Docstring
"""
whatdidido.logger
Process-wide logging for the activity logger.
Overview:
- `logger` is the package logger ("whatdidido"); components take child loggers
    from it (`logger.getChild(ClassName)`).
- `configure_logging(settings)` installs a JSON-lines file handler and a stderr
    console handler via logging.config.dictConfig. The console handler only emits
    at debug level. It is called once by the CLI;
    library use without it stays silent apart from the logging module's defaults.
- On configuration the previous log file is archived at most once per day and old
    archives beyond `days_to_keep` are deleted.
"""
# endregion
# region Imports
import logging
from datetime import datetime
from logging import Logger as T_Logger
from logging.config import dictConfig
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter  # type: ignore # noqa F401

from whatdidido.config import HistorySettings
from whatdidido.utils import get_time

# endregion

LOGGER_NAME = "whatdidido"
LOG_FILE_NAME = "whatdidido.jsonl"

logger: T_Logger = logging.getLogger(LOGGER_NAME)
system_logger = logger.getChild("SYSTEM")


def build_logging_config(log_file_path: Path, log_level: str) -> dict:
    """Build the dictConfig mapping for the file and console handlers."""
    level = log_level.upper()
    # The CLI reports failures itself, so the console stays quiet unless debugging.
    console_level = level if level == "DEBUG" else "CRITICAL"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
            },
            "standard": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "filename": str(log_file_path),
                "formatter": "json",
                "level": level,
            },
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "standard",
                "level": console_level,
            },
        },
        "loggers": {
            LOGGER_NAME: {
                "handlers": ["file", "console"],
                "level": level,
                "propagate": False,
            },
        },
    }


def configure_logging(settings: HistorySettings, days_to_keep: int = 10) -> T_Logger:
    """
    Configure the package logger for a CLI run.

    Args:
        settings (HistorySettings): Provides the log directory and level.
        days_to_keep (int): Number of archived log files to keep.

    Returns:
        Logger: The configured package logger.
    """
    log_file_path = settings.logs_dir / LOG_FILE_NAME
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    _archive_daily_log_file(log_file_path)
    _manage_logfile_archives(log_file_path, days_to_keep)

    dictConfig(build_logging_config(log_file_path, settings.log_level))
    system_logger.debug("Logger for %s initialized at %s.", LOGGER_NAME, log_file_path)
    return logger


def _archive_files(log_file_path: Path) -> list[Path]:
    return sorted(
        log_file_path.parent.glob(f"{log_file_path.stem}_*.jsonl"),
        key=lambda f: f.stat().st_mtime,
        reverse=True,
    )


def _archive_daily_log_file(log_file_path: Path) -> None:
    """Archive the log file daily by renaming it with a timestamp."""
    current_time = get_time().replace(tzinfo=None)
    archive_files = _archive_files(log_file_path)
    if archive_files:
        latest_archive = archive_files[0]
        timestamp_str = latest_archive.stem.replace(f"{log_file_path.stem}_", "")
        try:
            timestamp = datetime.strptime(timestamp_str, "%Y%m%d_%H%M%S")
        except ValueError:
            system_logger.warning(
                "Could not parse timestamp from archive file %s, skipping.",
                latest_archive,
            )
            return
        if (current_time - timestamp).total_seconds() < 24 * 3600:
            return

    if log_file_path.exists() and log_file_path.stat().st_size > 0:
        timestamp = current_time.strftime("%Y%m%d_%H%M%S")
        archive_path = log_file_path.with_name(
            f"{log_file_path.stem}_{timestamp}.jsonl"
        )
        log_file_path.rename(archive_path)


def _manage_logfile_archives(log_file_path: Path, days_to_keep: int = 10) -> None:
    """Keep only the most recent `days_to_keep` log archives."""
    archive_files = _archive_files(log_file_path)
    for archive_file in archive_files[days_to_keep:]:
        archive_file.unlink()


__all__ = ["LOGGER_NAME", "configure_logging", "logger"]
