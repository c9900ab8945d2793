"""Weather provider integrations."""

from .base import LocationSelector, WeatherProvider
from .models import (
    CurrentConditions,
    ForecastEntry,
    PlaceCandidate,
    QueryOutcome,
    WeatherReport,
)
from .openweather import OpenWeatherProvider

__all__ = [
    "CurrentConditions",
    "ForecastEntry",
    "LocationSelector",
    "OpenWeatherProvider",
    "PlaceCandidate",
    "QueryOutcome",
    "WeatherProvider",
    "WeatherReport",
]
