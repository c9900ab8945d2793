"""Typed models for normalized OpenWeather payloads."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@2x.png"


class PlaceCandidate(BaseModel):
    """Geocoding match offered as a city suggestion."""

    name: str
    state: str | None = None
    country: str
    latitude: float
    longitude: float

    @property
    def label(self) -> str:
        parts = [self.name, self.state, self.country]
        return ", ".join(part for part in parts if part)


class CurrentConditions(BaseModel):
    """Single-instant weather snapshot for one location."""

    city_name: str
    country_code: str | None = None
    utc_offset_seconds: int = 0
    temperature: float
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    humidity: int | None = None
    pressure: int | None = None
    wind_speed: float | None = None
    condition: str | None = None
    description: str | None = None
    icon: str | None = None
    sunrise: int | None = None
    sunset: int | None = None

    @property
    def temp_range_label(self) -> str:
        if self.temp_min is None or self.temp_max is None or self.temp_min == self.temp_max:
            return "Not available"
        return f"{self.temp_min:g}°C - {self.temp_max:g}°C"

    @property
    def icon_url(self) -> str | None:
        return ICON_URL_TEMPLATE.format(icon=self.icon) if self.icon else None


class ForecastEntry(BaseModel):
    """One timestamped reading from the 3-hour forecast feed."""

    timestamp: str = Field(description="Provider local-naive 'YYYY-MM-DD HH:MM:SS'")
    temperature: float | None = None
    condition: str | None = None
    description: str | None = None
    icon: str | None = None

    @property
    def date_key(self) -> str:
        return self.timestamp[0:10]

    @property
    def time_of_day(self) -> str:
        return self.timestamp[11:19]

    @property
    def icon_url(self) -> str | None:
        return ICON_URL_TEMPLATE.format(icon=self.icon) if self.icon else None


class WeatherReport(BaseModel):
    """Current conditions and daily forecast produced by one successful query."""

    current: CurrentConditions
    forecast: list[ForecastEntry] = Field(default_factory=list)
    resolved_name: str


class QueryOutcome(BaseModel):
    """Result of a weather query: skipped no-op, success with a report, or failure."""

    status: Literal["skipped", "success", "failure"]
    report: WeatherReport | None = None
    error: str | None = None
    notice: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "success"
