"""Weather lookup handler.

Turns a free-text city name into a render-ready ``LookupResult``. Every
failure mode collapses to the same user-facing message; the cause is kept
on ``Failure.reason`` and in the log.
"""

from __future__ import annotations

import logging

from .errors import CityNotFoundError, WeatherTransportError
from .http import OpenWeatherMapClient
from .provider import ProviderPayload, decode_payload, format_temperature
from .result import ERROR_MESSAGE, Failure, FailureReason, LookupResult, Success

_LOGGER = logging.getLogger(__name__)


def describe(payload: ProviderPayload, city: str) -> str:
    """Build the success sentence for a decoded payload.

    Raises:
        CityNotFoundError: If the payload carries no weather metrics.
    """
    if payload.main is None:
        raise CityNotFoundError(city, code=payload.code, provider_message=payload.message)
    name = payload.name if payload.name is not None else city
    return f"It's {format_temperature(payload.main.temp)} degrees in {name}!"


class WeatherLookupHandler:
    """Single-shot city lookup against the weather provider."""

    def __init__(self, client: OpenWeatherMapClient) -> None:
        self._client = client

    async def lookup(self, city: str) -> LookupResult:
        """Look up current weather for a city.

        Performs exactly one provider request. Never raises for provider or
        network failures.
        """
        try:
            status, body = await self._client.fetch_current_weather(city)
            text = describe(decode_payload(body, status), city)
        except WeatherTransportError as err:
            _LOGGER.warning("Weather lookup for %r failed: %s", city, err)
            return Failure(ERROR_MESSAGE, FailureReason.TRANSPORT)
        except CityNotFoundError as err:
            _LOGGER.info(
                "Provider did not recognize %r (cod=%s, message=%s)",
                city,
                err.code,
                err.provider_message,
            )
            return Failure(ERROR_MESSAGE, FailureReason.CITY_NOT_FOUND)

        _LOGGER.debug("Weather lookup for %r succeeded", city)
        return Success(text)
