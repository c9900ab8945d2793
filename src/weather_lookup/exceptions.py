"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class WeatherProviderError(Exception):
    """Raised when weather provider requests or normalization fail."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str | None = None,
        status_code: int | str | None = None,
    ) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class ProviderRejectedError(WeatherProviderError):
    """Raised when the provider answers with a non-success status sentinel."""


class GeolocationError(Exception):
    """Raised when a coordinate pair for the current location is unavailable."""
