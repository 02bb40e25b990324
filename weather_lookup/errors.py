"""Error types for weather provider lookups."""

from __future__ import annotations


class WeatherLookupError(Exception):
    """Base error for weather lookup failures."""


class WeatherTransportError(WeatherLookupError):
    """The provider reply could not be obtained or interpreted."""


class WeatherTimeout(WeatherTransportError):
    """Timeout while waiting for the provider."""


class WeatherConnectionError(WeatherTransportError):
    """Network connection to the provider failed."""


class WeatherResponseError(WeatherTransportError):
    """Provider response body could not be decoded."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class CityNotFoundError(WeatherLookupError):
    """Provider did not recognize the requested city."""

    def __init__(
        self,
        city: str,
        *,
        code: str | None = None,
        provider_message: str | None = None,
    ) -> None:
        super().__init__(f"City not found: {city!r}")
        self.city = city
        self.code = code
        self.provider_message = provider_message


class ConfigLoadError(WeatherLookupError):
    """Configuration could not be loaded."""
