"""Pytest configuration and fixtures for weather_lookup tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from weather_lookup import OpenWeatherMapClient, WeatherLookupHandler

TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://weather.example.test"


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def client(mock_session: MagicMock) -> OpenWeatherMapClient:
    """Provider client bound to the mock session."""
    return OpenWeatherMapClient(
        mock_session,
        api_key=TEST_API_KEY,
        base_url=TEST_BASE_URL,
        timeout=5,
    )


@pytest.fixture
def handler(client: OpenWeatherMapClient) -> WeatherLookupHandler:
    """Lookup handler using the mocked provider client."""
    return WeatherLookupHandler(client)


def create_mock_response(
    status: int = 200,
    json_data: dict[str, Any] | None = None,
    text_data: str | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data serialized into the text() result
        text_data: Raw data to return from text() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_data is not None:
        response.text.return_value = json.dumps(json_data)
    if text_data is not None:
        response.text.return_value = text_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
