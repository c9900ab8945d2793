"""Tests for exact-midday daily forecast sampling."""

from __future__ import annotations

from weather_lookup.forecast import sample_daily
from weather_lookup.weather.models import ForecastEntry


def _entry(ts: str, temp: float = 10.0, condition: str = "Clouds") -> ForecastEntry:
    return ForecastEntry(timestamp=ts, temperature=temp, condition=condition, icon="04d")


def test_keeps_one_midday_entry_per_date_in_order() -> None:
    entries = [
        _entry("2024-01-01 09:00:00"),
        _entry("2024-01-01 12:00:00", temp=11.0),
        _entry("2024-01-02 12:00:00", temp=12.0),
        _entry("2024-01-02 15:00:00"),
    ]
    result = sample_daily(entries)
    assert [e.timestamp for e in result] == ["2024-01-01 12:00:00", "2024-01-02 12:00:00"]
    assert [e.temperature for e in result] == [11.0, 12.0]


def test_date_without_midday_reading_is_dropped_not_substituted() -> None:
    entries = [
        _entry("2024-01-01 12:00:00"),
        _entry("2024-01-02 09:00:00"),
        _entry("2024-01-02 15:00:00"),
        _entry("2024-01-03 12:00:00"),
    ]
    result = sample_daily(entries)
    assert [e.date_key for e in result] == ["2024-01-01", "2024-01-03"]


def test_first_midday_entry_wins_for_duplicate_date() -> None:
    first = _entry("2024-01-01 12:00:00", temp=1.0)
    second = _entry("2024-01-01 12:00:00", temp=2.0)
    result = sample_daily([first, second])
    assert result == [first]


def test_empty_input_gives_empty_output() -> None:
    assert sample_daily([]) == []


def test_output_has_unique_dates_and_midday_times_only() -> None:
    entries = [
        _entry(f"2024-02-{day:02d} {hour:02d}:00:00")
        for day in range(1, 6)
        for hour in range(0, 24, 3)
    ]
    result = sample_daily(entries)
    dates = [e.date_key for e in result]
    assert len(dates) == len(set(dates)) == 5
    assert all(e.time_of_day == "12:00:00" for e in result)


def test_accepts_generator_input() -> None:
    result = sample_daily(_entry(ts) for ts in ["2024-01-01 12:00:00", "2024-01-01 15:00:00"])
    assert len(result) == 1
