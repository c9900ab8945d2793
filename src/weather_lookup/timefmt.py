"""Clock and date formatting for provider timestamps."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

CLOCK_FORMAT = "%I:%M %p"


def format_event_time(epoch_seconds: int, utc_offset_seconds: int) -> str:
    """Format a UTC epoch as the location's 12-hour wall clock, e.g. ``06:42 PM``."""
    local = datetime.fromtimestamp(epoch_seconds + utc_offset_seconds, tz=UTC)
    return local.strftime(CLOCK_FORMAT)


def format_now_at(utc_offset_seconds: int, now: datetime | None = None) -> str:
    """Current wall-clock time at a location with the given UTC offset.

    Advisory only: it reads the local machine clock, not the provider's.
    """
    current = now or datetime.now(UTC)
    current = current.replace(tzinfo=UTC) if current.tzinfo is None else current.astimezone(UTC)
    return (current + timedelta(seconds=utc_offset_seconds)).strftime(CLOCK_FORMAT)


def format_forecast_day(timestamp: str) -> str:
    """Short day label for a forecast card, e.g. ``Mon, Jan 1``."""
    day = datetime.strptime(timestamp[0:10], "%Y-%m-%d")
    return f"{day:%a}, {day:%b} {day.day}"
