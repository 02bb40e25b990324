"""OpenWeatherMap current weather payload decoding.

The provider answers every query with a JSON object. A recognized city
carries a ``main`` object with the weather metrics; an unrecognized one
carries only ``cod``/``message`` (e.g. ``{"cod": "404", "message": "city
not found"}``), often with a non-200 status.

Only the fields the lookup needs are decoded. ``main`` is optional and its
absence is reported through ``ProviderPayload.city_found``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .errors import WeatherResponseError


@dataclass(frozen=True)
class MainMetrics:
    """Weather metrics from the ``main`` object.

    Attributes:
        temp: Current temperature in the requested unit system.
        feels_like: Perceived temperature, if reported.
        humidity: Relative humidity percentage, if reported.
    """

    temp: float
    feels_like: float | None = None
    humidity: float | None = None


@dataclass(frozen=True)
class ProviderPayload:
    """Decoded provider reply.

    Attributes:
        main: Weather metrics, None when the city was not recognized.
        name: Resolved location name.
        code: Provider status code (``cod``), stringified.
        message: Provider message, usually only set on errors.
    """

    main: MainMetrics | None
    name: str | None = None
    code: str | None = None
    message: str | None = None

    @property
    def city_found(self) -> bool:
        """Whether the provider returned weather metrics."""
        return self.main is not None


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _optional_number(data: dict[str, Any], key: str) -> float | None:
    value = data.get(key)
    return value if _is_number(value) else None


def _decode_main(raw: Any, status: int) -> MainMetrics:
    if not isinstance(raw, dict):
        raise WeatherResponseError(status, "Provider 'main' field is not an object")
    temp = raw.get("temp")
    if not _is_number(temp):
        raise WeatherResponseError(status, "Provider 'main.temp' is missing or invalid")
    return MainMetrics(
        temp=temp,
        feels_like=_optional_number(raw, "feels_like"),
        humidity=_optional_number(raw, "humidity"),
    )


def decode_payload(body: str, status: int = 200) -> ProviderPayload:
    """Decode a provider response body.

    Args:
        body: Raw response text.
        status: HTTP status the body arrived with, kept for diagnostics.

    Returns:
        Decoded payload. ``payload.main`` is None when the city was not
        recognized.

    Raises:
        WeatherResponseError: If the body is not a JSON object, or carries a
            malformed ``main`` object.
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError, RecursionError) as err:
        raise WeatherResponseError(status, "Provider response is not valid JSON") from err

    if not isinstance(data, dict):
        raise WeatherResponseError(status, "Provider response is not a JSON object")

    main = _decode_main(data["main"], status) if "main" in data else None
    name = data.get("name")
    code = data.get("cod")
    message = data.get("message")

    return ProviderPayload(
        main=main,
        name=name if isinstance(name, str) else None,
        code=str(code) if code is not None else None,
        message=message if isinstance(message, str) else None,
    )


def format_temperature(value: float) -> str:
    """Render a temperature the way it reads in a sentence.

    Integral values drop the fractional part (72.0 -> "72").
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
