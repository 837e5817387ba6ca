"""Millisecond timestamp formatting used by the verbose line format."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def format_time_millis(timestamp_ms: int) -> str:
    """Render an epoch-millisecond timestamp as ``YYYY-MM-DD HH:MM:SS.mmm`` in UTC.

    Parameters:
        timestamp_ms: Milliseconds since the Unix epoch.

    Returns:
        The formatted timestamp.

    Raises:
        OverflowError: If the timestamp lies past the end of the calendar
            range supported by ``datetime``.
    """
    seconds, millis = divmod(timestamp_ms, 1000)
    dt = _EPOCH + timedelta(seconds=seconds)
    return f"{dt:%Y-%m-%d %H:%M:%S}.{millis:03d}"
