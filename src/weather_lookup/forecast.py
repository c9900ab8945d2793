"""Daily sampling of the 3-hour forecast feed."""

from __future__ import annotations

from collections.abc import Iterable

from .weather.models import ForecastEntry

MIDDAY = "12:00:00"


def sample_daily(entries: Iterable[ForecastEntry]) -> list[ForecastEntry]:
    """Keep the first exact-midday entry for each date, in source order.

    Dates without a 12:00:00 reading are dropped rather than substituted
    with the nearest available one.
    """
    daily: dict[str, ForecastEntry] = {}
    for entry in entries:
        if entry.time_of_day != MIDDAY:
            continue
        daily.setdefault(entry.date_key, entry)
    return list(daily.values())
