"""OpenWeather (api.openweathermap.org) weather provider implementation."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import Settings
from ..exceptions import ProviderRejectedError, WeatherProviderError
from ..redaction import sanitize_for_logging, sanitize_text
from .base import LocationSelector, WeatherProvider
from .models import CurrentConditions, ForecastEntry, PlaceCandidate

CURRENT_PATH = "/data/2.5/weather"
FORECAST_PATH = "/data/2.5/forecast"
GEOCODING_PATH = "/geo/1.0/direct"

# The two data endpoints report success differently: numeric for current
# weather, string for forecast. Each is compared against its own sentinel.
CURRENT_SUCCESS_COD = 200
FORECAST_SUCCESS_COD = "200"

DT_TXT_FORMAT = "%Y-%m-%d %H:%M:%S"


class OpenWeatherProvider(WeatherProvider):
    """Fetches and normalizes current weather, forecast and geocoding results."""

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self._client = httpx.Client(
            base_url=settings.base_url,
            timeout=settings.weather_timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def __enter__(self) -> OpenWeatherProvider:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_current(self, selector: LocationSelector) -> CurrentConditions:
        """Fetch current conditions by city name or coordinates."""
        payload = self._request_json(
            CURRENT_PATH,
            params={**selector, "units": self.settings.openweather_units},
            context="current weather",
        )
        if not isinstance(payload, dict):
            raise WeatherProviderError(
                "OpenWeather current weather returned a non-object payload.",
                endpoint=CURRENT_PATH,
            )
        self._check_sentinel(payload, CURRENT_SUCCESS_COD, endpoint=CURRENT_PATH)
        return self._normalize_current(payload)

    def fetch_forecast(self, selector: LocationSelector) -> list[ForecastEntry]:
        """Fetch the 3-hour forecast list by city name or coordinates."""
        payload = self._request_json(
            FORECAST_PATH,
            params={**selector, "units": self.settings.openweather_units},
            context="forecast",
        )
        if not isinstance(payload, dict):
            raise WeatherProviderError(
                "OpenWeather forecast returned a non-object payload.",
                endpoint=FORECAST_PATH,
            )
        self._check_sentinel(payload, FORECAST_SUCCESS_COD, endpoint=FORECAST_PATH)

        raw_entries = payload.get("list")
        if not isinstance(raw_entries, list):
            raise WeatherProviderError(
                "OpenWeather forecast payload missing 'list' array.",
                endpoint=FORECAST_PATH,
            )
        return [self._normalize_forecast_entry(item) for item in raw_entries]

    def geocode(self, query: str, limit: int) -> list[PlaceCandidate]:
        """Return up to ``limit`` place candidates in provider order."""
        payload = self._request_json(
            GEOCODING_PATH,
            params={"q": query, "limit": limit},
            context="geocoding",
        )
        if not isinstance(payload, list):
            raise WeatherProviderError(
                "OpenWeather geocoding returned an unexpected payload "
                f"type {type(payload).__name__}.",
                endpoint=GEOCODING_PATH,
            )

        candidates: list[PlaceCandidate] = []
        for item in payload:
            candidate = self._normalize_candidate(item)
            if candidate is None:
                self.logger.debug("Skipping unparseable geocoding row: %r", item)
                continue
            candidates.append(candidate)
        return candidates

    def _request_json(self, path: str, params: dict[str, Any], context: str) -> Any:
        # Error bodies on the data endpoints still carry a `cod`, so the HTTP
        # status alone is not used to decide success.
        query = {**params, "appid": self.settings.openweather_api_key}
        self.logger.debug(
            "OpenWeather %s request %s params=%s",
            context,
            path,
            sanitize_for_logging(query),
        )
        try:
            response = self._client.get(path, params=query)
        except httpx.HTTPError as exc:
            raise WeatherProviderError(
                f"OpenWeather {context} request failed: "
                f"{type(exc).__name__}: {sanitize_text(str(exc))}",
                endpoint=path,
            ) from exc

        self.logger.debug(
            "OpenWeather %s -> HTTP %d (%s)",
            context,
            response.status_code,
            sanitize_text(str(response.request.url)),
        )
        try:
            return response.json()
        except ValueError as exc:
            raise WeatherProviderError(
                f"OpenWeather {context} returned non-JSON response "
                f"(HTTP {response.status_code}): {sanitize_text(response.text[:300])}",
                endpoint=path,
                status_code=response.status_code,
            ) from exc

    @staticmethod
    def _check_sentinel(payload: dict[str, Any], expected: int | str, *, endpoint: str) -> None:
        cod = payload.get("cod")
        if cod != expected:
            message = payload.get("message") or "unknown error"
            raise ProviderRejectedError(
                f"OpenWeather {endpoint} reported cod={cod!r}: {sanitize_text(str(message))}",
                endpoint=endpoint,
                status_code=cod,
            )

    @staticmethod
    def _first_condition(payload: dict[str, Any]) -> dict[str, Any]:
        conditions = payload.get("weather")
        if isinstance(conditions, list) and conditions and isinstance(conditions[0], dict):
            return conditions[0]
        return {}

    def _normalize_current(self, payload: dict[str, Any]) -> CurrentConditions:
        main = payload.get("main")
        if not isinstance(main, dict):
            raise WeatherProviderError(
                "OpenWeather current weather payload missing 'main' object.",
                endpoint=CURRENT_PATH,
            )
        sys_block = payload.get("sys") if isinstance(payload.get("sys"), dict) else {}
        wind = payload.get("wind") if isinstance(payload.get("wind"), dict) else {}
        condition = self._first_condition(payload)

        try:
            return CurrentConditions(
                city_name=payload.get("name"),
                country_code=sys_block.get("country"),
                utc_offset_seconds=payload.get("timezone") or 0,
                temperature=main.get("temp"),
                feels_like=main.get("feels_like"),
                temp_min=main.get("temp_min"),
                temp_max=main.get("temp_max"),
                humidity=main.get("humidity"),
                pressure=main.get("pressure"),
                wind_speed=wind.get("speed"),
                condition=condition.get("main"),
                description=condition.get("description"),
                icon=condition.get("icon"),
                sunrise=sys_block.get("sunrise"),
                sunset=sys_block.get("sunset"),
            )
        except ValidationError as exc:
            raise WeatherProviderError(
                f"OpenWeather current weather payload failed validation: {exc}",
                endpoint=CURRENT_PATH,
            ) from exc

    def _normalize_forecast_entry(self, item: Any) -> ForecastEntry:
        if not isinstance(item, dict):
            raise WeatherProviderError(
                "OpenWeather forecast entry is not an object.",
                endpoint=FORECAST_PATH,
            )
        timestamp = item.get("dt_txt")
        if not isinstance(timestamp, str):
            raise WeatherProviderError(
                f"OpenWeather forecast entry has invalid 'dt_txt': {timestamp!r}",
                endpoint=FORECAST_PATH,
            )
        try:
            datetime.strptime(timestamp, DT_TXT_FORMAT)
        except ValueError as exc:
            raise WeatherProviderError(
                f"OpenWeather forecast entry has invalid 'dt_txt': {timestamp!r}",
                endpoint=FORECAST_PATH,
            ) from exc
        main = item.get("main") if isinstance(item.get("main"), dict) else {}
        condition = self._first_condition(item)
        try:
            return ForecastEntry(
                timestamp=timestamp,
                temperature=main.get("temp"),
                condition=condition.get("main"),
                description=condition.get("description"),
                icon=condition.get("icon"),
            )
        except ValidationError as exc:
            raise WeatherProviderError(
                f"OpenWeather forecast entry failed validation: {exc}",
                endpoint=FORECAST_PATH,
            ) from exc

    @staticmethod
    def _normalize_candidate(item: Any) -> PlaceCandidate | None:
        if not isinstance(item, dict):
            return None
        try:
            return PlaceCandidate(
                name=item.get("name"),
                state=item.get("state"),
                country=item.get("country"),
                latitude=item.get("lat"),
                longitude=item.get("lon"),
            )
        except ValidationError:
            return None
