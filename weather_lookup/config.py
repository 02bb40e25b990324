"""Configuration loading.

Configuration comes from an optional YAML file, then environment
overrides. The provider credential is injected into the client and the
server from here rather than read as a module constant.

Example ``weather_lookup.yaml``::

    api_key: "<openweathermap key>"
    port: 3000
    timeout: 10
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigLoadError
from .http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

ENV_API_KEY = "OPENWEATHERMAP_API_KEY"
ENV_HOST = "WEATHER_LOOKUP_HOST"
ENV_PORT = "WEATHER_LOOKUP_PORT"
ENV_TIMEOUT = "WEATHER_LOOKUP_TIMEOUT"
ENV_LOG_LEVEL = "WEATHER_LOOKUP_LOG_LEVEL"


@dataclass(frozen=True)
class WeatherConfig:
    """Process-wide, read-only settings.

    Attributes:
        api_key: Provider credential. Hidden from repr.
        base_url: Provider scheme and host.
        timeout: Outbound request timeout in seconds.
        host: Interface the web server binds to.
        port: Port the web server listens on.
        log_level: Root logging level name.
    """

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}")
    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as err:
            raise ConfigLoadError(f"Invalid YAML in {path}: {err}") from err
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Expected a mapping in {path}")
    return data


def _as_int(key: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as err:
        raise ConfigLoadError(f"Invalid {key}: {value!r}") from err


def _as_float(key: str, value: Any) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError) as err:
        raise ConfigLoadError(f"Invalid {key}: {value!r}") from err
    if result <= 0:
        raise ConfigLoadError(f"Invalid {key}: must be positive")
    return result


def _as_level(value: Any) -> str:
    level = str(value).upper()
    if level not in logging.getLevelNamesMapping():
        raise ConfigLoadError(f"Invalid log_level: {value!r}")
    return level


def load_config(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> WeatherConfig:
    """Load configuration from a YAML file and the environment.

    Args:
        path: Optional YAML file. Its keys match ``WeatherConfig`` fields.
        env: Environment mapping, defaults to ``os.environ``.

    Returns:
        Loaded configuration.

    Raises:
        ConfigLoadError: If the file is missing or malformed, a value is
            invalid, or no API key is configured.
    """
    env = os.environ if env is None else env
    data = _load_yaml(path) if path is not None else {}

    overrides = {
        "api_key": env.get(ENV_API_KEY),
        "host": env.get(ENV_HOST),
        "port": env.get(ENV_PORT),
        "timeout": env.get(ENV_TIMEOUT),
        "log_level": env.get(ENV_LOG_LEVEL),
    }
    data.update({key: value for key, value in overrides.items() if value})

    api_key = data.get("api_key")
    if not api_key:
        raise ConfigLoadError(f"No API key configured (set {ENV_API_KEY})")

    config = WeatherConfig(api_key=str(api_key))
    if "base_url" in data:
        config = replace(config, base_url=str(data["base_url"]))
    if "timeout" in data:
        config = replace(config, timeout=_as_float("timeout", data["timeout"]))
    if "host" in data:
        config = replace(config, host=str(data["host"]))
    if "port" in data:
        config = replace(config, port=_as_int("port", data["port"]))
    if "log_level" in data:
        config = replace(config, log_level=_as_level(data["log_level"]))
    return config
