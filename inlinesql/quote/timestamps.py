"""ISO-8601 rendering for timezone-aware timestamps.

Offsets are rendered as ``Z`` for UTC and ``+HH:MM`` / ``-HH:MM`` otherwise.
Sub-minute offset seconds are dropped; microseconds are kept only when
non-zero.
"""
from __future__ import annotations

from datetime import datetime


def format_offset(offset_seconds: int) -> str:
    """Return the zone suffix for a UTC offset given in seconds."""
    if offset_seconds == 0:
        return "Z"
    sign = "+" if offset_seconds > 0 else "-"
    magnitude = abs(offset_seconds)
    hours, remainder = divmod(magnitude, 3600)
    return f"{sign}{hours:02d}:{remainder // 60:02d}"


def format_timestamp(value: datetime) -> str:
    """Return the unquoted ``YYYY-MM-DDTHH:MM:SS[.ffffff]<zone>`` text.

    Args:
        value: An aware datetime (``utcoffset()`` must not be ``None``).

    Returns:
        The timestamp body followed by its zone suffix.
    """
    offset = value.utcoffset()
    if offset is None:
        raise ValueError("format_timestamp() requires an aware datetime")
    body = value.replace(microsecond=0, tzinfo=None).isoformat()
    if value.microsecond > 0:
        body += f".{value.microsecond:06d}"
    return body + format_offset(int(offset.total_seconds()))
