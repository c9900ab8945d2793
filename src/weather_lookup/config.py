"""Typed settings loader for the weather lookup client."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AnyUrl, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    openweather_api_key: str = Field(alias="OPENWEATHER_API_KEY", repr=False)
    openweather_base_url: AnyUrl = Field(
        default=AnyUrl("https://api.openweathermap.org"),
        alias="OPENWEATHER_BASE_URL",
    )
    openweather_units: Literal["metric", "imperial", "standard"] = Field(
        default="metric",
        alias="OPENWEATHER_UNITS",
    )
    weather_timeout_seconds: float = Field(default=10.0, alias="WEATHER_TIMEOUT_SECONDS")
    suggestion_limit: int = Field(default=5, alias="SUGGESTION_LIMIT")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_ranges(self) -> Settings:
        """Validate numeric limits and the API key."""
        if not self.openweather_api_key.strip():
            raise ValueError("OPENWEATHER_API_KEY must not be empty.")
        if self.weather_timeout_seconds <= 0:
            raise ValueError("WEATHER_TIMEOUT_SECONDS must be > 0.")
        # The geocoding endpoint caps `limit` at 5.
        if not (1 <= self.suggestion_limit <= 5):
            raise ValueError("SUGGESTION_LIMIT must be between 1 and 5.")
        return self

    @property
    def base_url(self) -> str:
        return str(self.openweather_base_url).rstrip("/")

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "base_url": self.base_url,
            "units": self.openweather_units,
            "timeout_seconds": self.weather_timeout_seconds,
            "suggestion_limit": self.suggestion_limit,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
