"""HTTP client for the OpenWeatherMap current weather endpoint."""

from __future__ import annotations

import logging
from typing import Final
from urllib.parse import quote

import aiohttp
from yarl import URL

from .errors import WeatherConnectionError, WeatherResponseError, WeatherTimeout

_LOGGER = logging.getLogger(__name__)

CURRENT_WEATHER_PATH: Final = "/data/2.5/weather"
DEFAULT_BASE_URL: Final = "https://api.openweathermap.org"
UNITS: Final = "imperial"
DEFAULT_TIMEOUT: Final = 10.0

_REDACTED: Final = "REDACTED"


class OpenWeatherMapClient:
    """HTTP client wrapper for the provider's current weather endpoint."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        *,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    def _compose(self, city: str, appid: str) -> URL:
        # City and key are percent-encoded here; encoded=True stops yarl
        # from re-quoting them. Lone surrogates are passed through as bytes
        # and left for the provider to reject.
        query = (
            f"q={quote(city, safe='', errors='surrogatepass')}"
            f"&units={UNITS}"
            f"&appid={quote(appid, safe='', errors='surrogatepass')}"
        )
        return URL(f"{self._base_url}{CURRENT_WEATHER_PATH}?{query}", encoded=True)

    def build_url(self, city: str) -> URL:
        """Build the request URL for a city, credential included."""
        return self._compose(city, self._api_key)

    def redacted_url(self, city: str) -> URL:
        """Build the request URL for a city with the credential masked."""
        return self._compose(city, _REDACTED)

    async def fetch_current_weather(self, city: str) -> tuple[int, str]:
        """Query current conditions for a city.

        Non-200 replies are returned as-is: the provider reports an unknown
        city through the JSON body, not only through the status.

        Returns:
            Tuple of HTTP status and response body text.

        Raises:
            WeatherTimeout: If the request exceeds the configured timeout.
            WeatherConnectionError: If the network request fails.
            WeatherResponseError: If the body cannot be decoded as text.
        """
        url = self.build_url(city)
        _LOGGER.debug("Requesting %s", self.redacted_url(city))
        try:
            async with self._session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                try:
                    body = await resp.text()
                except UnicodeDecodeError as err:
                    raise WeatherResponseError(
                        resp.status, "Weather response is not valid text"
                    ) from err
                return resp.status, body
        except TimeoutError as err:
            raise WeatherTimeout("Weather request timed out") from err
        except aiohttp.ClientError as err:
            raise WeatherConnectionError("Weather request failed") from err
