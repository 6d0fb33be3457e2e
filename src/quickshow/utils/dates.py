"""Date/time helpers for show scheduling."""

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo


def combine_show_datetime(show_date: str, show_time: str, tz: ZoneInfo) -> datetime:
    """
    Combine an ISO date and a time-of-day string into a UTC datetime.

    Args:
        show_date: Date in ``YYYY-MM-DD`` form
        show_time: Time of day, ``HH:MM`` or ``HH:MM:SS``
        tz: Timezone the wall-clock values are expressed in

    Returns:
        Timezone-aware datetime normalised to UTC

    Raises:
        ValueError: If either part cannot be parsed
    """
    parsed_date = date.fromisoformat(show_date.strip())
    parsed_time = time.fromisoformat(show_time.strip())
    if parsed_time.tzinfo is not None:
        raise ValueError(f"time of day must not carry an offset: {show_time!r}")
    local = datetime.combine(parsed_date, parsed_time, tzinfo=tz)
    return local.astimezone(timezone.utc)


def to_utc(value: datetime) -> datetime:
    """Return *value* in UTC. Naive values (e.g. from SQLite) are assumed to be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_date_key(value: datetime) -> str:
    """``YYYY-MM-DD`` of *value* in UTC."""
    return to_utc(value).date().isoformat()
