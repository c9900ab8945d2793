"""Provider-agnostic weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import CurrentConditions, ForecastEntry, PlaceCandidate

LocationSelector = dict[str, str | float]


class WeatherProvider(ABC):
    """Base contract for providers used by the query service.

    A location selector is either ``{"q": city}`` or ``{"lat": lat, "lon": lon}``.
    """

    @abstractmethod
    def fetch_current(self, selector: LocationSelector) -> CurrentConditions:
        """Fetch and normalize current conditions."""

    @abstractmethod
    def fetch_forecast(self, selector: LocationSelector) -> list[ForecastEntry]:
        """Fetch and normalize the raw 3-hour forecast list."""

    @abstractmethod
    def geocode(self, query: str, limit: int) -> list[PlaceCandidate]:
        """Return ranked place candidates for a free-text query."""

    @abstractmethod
    def close(self) -> None:
        """Release provider resources."""
