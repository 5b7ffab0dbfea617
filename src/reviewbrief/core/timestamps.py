from __future__ import annotations

from datetime import datetime, timezone

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def format_timestamp(value: datetime) -> str:
    """Render a timestamp for the console, always in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime(DISPLAY_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """Inverse of format_timestamp. Returns an aware UTC datetime."""
    return datetime.strptime(text, DISPLAY_FORMAT).replace(tzinfo=timezone.utc)
