from datetime import datetime

from whatdidido.constants import CONTENT_DISPLAY_WIDTH, TIMESTAMP_DISPLAY_FORMAT


def get_time() -> datetime:
    """
    Get the current time as a timezone-aware datetime in the local time zone.

    Returns:
        datetime: The current local time with its UTC offset.

    Example:
        >>> get_time().tzinfo is not None
        True
    """
    return datetime.now().astimezone()


def to_local(timestamp: datetime) -> datetime:
    """
    Convert a timestamp to the process's local time zone.

    Naive timestamps are assumed to already be local time.

    Args:
        timestamp (datetime): The timestamp to convert.

    Returns:
        datetime: A timezone-aware datetime in the local time zone.
    """
    return timestamp.astimezone()


def truncate_content(content: str, width: int = CONTENT_DISPLAY_WIDTH) -> str:
    """
    Shorten text for tabular display.

    Args:
        content (str): The text to shorten.
        width (int): Maximum length of the returned string.

    Returns:
        str: The stripped text, cut to `width - 3` characters plus "..." when longer
            than `width`.

    Example:
        >>> truncate_content("x" * 70, width=10)
        'xxxxxxx...'
        >>> truncate_content("  ls -la  ")
        'ls -la'
    """
    if len(content) > width:
        content = content[: width - 3] + "..."
    return content.strip()


def format_timestamp(timestamp: datetime) -> str:
    """
    Format a timestamp for display, e.g. "2024-01-15 02:30:00 PM Monday".
    """
    return to_local(timestamp).strftime(TIMESTAMP_DISPLAY_FORMAT)
