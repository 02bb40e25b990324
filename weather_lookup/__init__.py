"""Weather lookup form backed by the OpenWeatherMap API."""

__version__ = "0.1.0"

from .config import WeatherConfig, load_config
from .errors import (
    CityNotFoundError,
    ConfigLoadError,
    WeatherConnectionError,
    WeatherLookupError,
    WeatherResponseError,
    WeatherTimeout,
    WeatherTransportError,
)
from .http import OpenWeatherMapClient
from .lookup import WeatherLookupHandler
from .provider import MainMetrics, ProviderPayload, decode_payload
from .result import (
    ERROR_MESSAGE,
    Failure,
    FailureReason,
    LookupResult,
    Success,
    render_context,
)
from .web import create_app

__all__ = [
    "ERROR_MESSAGE",
    "CityNotFoundError",
    "ConfigLoadError",
    "Failure",
    "FailureReason",
    "LookupResult",
    "MainMetrics",
    "OpenWeatherMapClient",
    "ProviderPayload",
    "Success",
    "WeatherConfig",
    "WeatherConnectionError",
    "WeatherLookupError",
    "WeatherLookupHandler",
    "WeatherResponseError",
    "WeatherTimeout",
    "WeatherTransportError",
    "__version__",
    "create_app",
    "decode_payload",
    "load_config",
    "render_context",
]
