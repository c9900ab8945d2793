"""Weather query orchestration and city suggestion lookup."""

from __future__ import annotations

import logging

from .exceptions import WeatherProviderError
from .forecast import sample_daily
from .weather.base import LocationSelector, WeatherProvider
from .weather.models import PlaceCandidate, QueryOutcome, WeatherReport

CITY_NOT_FOUND_NOTICE = "City not found."
LOCATION_UNAVAILABLE_NOTICE = "Could not fetch weather for this location."


class WeatherQueryService:
    """Runs current + forecast lookups and geocoding suggestions against one provider."""

    def __init__(
        self,
        provider: WeatherProvider,
        logger: logging.Logger,
        suggestion_limit: int = 5,
    ) -> None:
        self.provider = provider
        self.logger = logger
        self.suggestion_limit = suggestion_limit

    def query_by_name(self, city: str) -> QueryOutcome:
        """Look up weather by city name; blank input is a no-op."""
        name = city.strip()
        if not name:
            return QueryOutcome(status="skipped")
        return self._query({"q": name}, notice=CITY_NOT_FOUND_NOTICE)

    def query_by_coords(self, lat: float, lon: float) -> QueryOutcome:
        """Look up weather by coordinates; the report carries the resolved place name."""
        if not (-90 <= lat <= 90) or not (-180 <= lon <= 180):
            error = f"Invalid coordinates ({lat}, {lon})."
            self.logger.error("Weather query rejected: %s", error)
            return QueryOutcome(
                status="failure",
                error=error,
                notice=LOCATION_UNAVAILABLE_NOTICE,
            )
        return self._query({"lat": lat, "lon": lon}, notice=LOCATION_UNAVAILABLE_NOTICE)

    def suggest(self, query: str) -> list[PlaceCandidate]:
        """Return ranked place candidates; failures degrade to an empty list."""
        text = query.strip()
        if not text:
            return []
        try:
            return self.provider.geocode(text, limit=self.suggestion_limit)[
                : self.suggestion_limit
            ]
        except WeatherProviderError as exc:
            self.logger.warning("Suggestion lookup failed: %s", exc)
            return []

    def _query(self, selector: LocationSelector, *, notice: str) -> QueryOutcome:
        try:
            current = self.provider.fetch_current(selector)
            entries = self.provider.fetch_forecast(selector)
        except WeatherProviderError as exc:
            self.logger.error("Weather query failed: %s", exc)
            return QueryOutcome(status="failure", error=str(exc), notice=notice)

        report = WeatherReport(
            current=current,
            forecast=sample_daily(entries),
            resolved_name=current.city_name,
        )
        self.logger.info(
            "Weather query succeeded for %s (%d forecast days)",
            report.resolved_name,
            len(report.forecast),
        )
        return QueryOutcome(status="success", report=report)
