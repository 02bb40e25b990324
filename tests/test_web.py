"""Tests for the aiohttp web application."""

from __future__ import annotations

from collections.abc import AsyncIterator
from unittest.mock import AsyncMock

import pytest
from aiohttp import test_utils, web

from weather_lookup import ERROR_MESSAGE, Failure, Success, WeatherConfig, create_app


@pytest.fixture
def lookup_handler() -> AsyncMock:
    """Stand-in lookup handler."""
    handler = AsyncMock()
    handler.lookup.return_value = Success("It's 72.5 degrees in Austin!")
    return handler


@pytest.fixture
async def web_client(lookup_handler: AsyncMock) -> AsyncIterator[test_utils.TestClient]:
    """Test client for an app wired to the stand-in handler."""
    app = create_app(WeatherConfig(api_key="test-api-key"), handler=lookup_handler)
    client = test_utils.TestClient(test_utils.TestServer(app))
    await client.start_server()
    try:
        yield client
    finally:
        await client.close()


class TestIndex:
    """GET /."""

    async def test_renders_empty_form(
        self, web_client: test_utils.TestClient, lookup_handler: AsyncMock
    ) -> None:
        """First load shows the form and no message."""
        resp = await web_client.get("/")
        body = await resp.text()

        assert resp.status == 200
        assert resp.content_type == "text/html"
        assert 'name="city"' in body
        assert 'class="weather"' not in body
        assert 'class="error"' not in body
        lookup_handler.lookup.assert_not_called()


class TestSubmit:
    """POST /."""

    async def test_success_rendered(
        self, web_client: test_utils.TestClient, lookup_handler: AsyncMock
    ) -> None:
        """Success text appears and no error."""
        resp = await web_client.post("/", data={"city": "Austin"})
        body = await resp.text()

        assert resp.status == 200
        assert "It&#39;s 72.5 degrees in Austin!" in body
        assert 'class="error"' not in body
        lookup_handler.lookup.assert_awaited_once_with("Austin")

    async def test_failure_rendered(
        self, web_client: test_utils.TestClient, lookup_handler: AsyncMock
    ) -> None:
        """Error message appears and no weather text."""
        lookup_handler.lookup.return_value = Failure(ERROR_MESSAGE)

        resp = await web_client.post("/", data={"city": "Nonexistentville"})
        body = await resp.text()

        assert resp.status == 200
        assert ERROR_MESSAGE in body
        assert 'class="weather"' not in body

    async def test_missing_city_field_passes_empty_string(
        self, web_client: test_utils.TestClient, lookup_handler: AsyncMock
    ) -> None:
        """Absent form field is looked up as an empty city."""
        lookup_handler.lookup.return_value = Failure(ERROR_MESSAGE)

        await web_client.post("/", data={})

        lookup_handler.lookup.assert_awaited_once_with("")

    async def test_output_is_escaped(
        self, web_client: test_utils.TestClient, lookup_handler: AsyncMock
    ) -> None:
        """Provider-supplied names are HTML-escaped."""
        lookup_handler.lookup.return_value = Success(
            "It's 1 degrees in <script>x</script>!"
        )

        resp = await web_client.post("/", data={"city": "x"})
        body = await resp.text()

        assert "<script>" not in body
        assert "&lt;script&gt;" in body


class TestStatic:
    """Static assets."""

    async def test_stylesheet_served(self, web_client: test_utils.TestClient) -> None:
        resp = await web_client.get("/static/css/style.css")

        assert resp.status == 200
        assert "ghost-button" in await resp.text()


class TestProviderSession:
    """App built without an injected handler talks to the provider itself."""

    async def test_config_drives_provider_requests(self) -> None:
        """Startup wires config into a live provider client."""
        seen: list[dict[str, str]] = []

        async def current_weather(request: web.Request) -> web.Response:
            seen.append(dict(request.query))
            return web.json_response({"main": {"temp": 55}, "name": "New York"})

        provider = web.Application()
        provider.router.add_get("/data/2.5/weather", current_weather)
        provider_server = test_utils.TestServer(provider)
        await provider_server.start_server()

        config = WeatherConfig(
            api_key="stub-key", base_url=str(provider_server.make_url(""))
        )
        client = test_utils.TestClient(test_utils.TestServer(create_app(config)))
        await client.start_server()
        try:
            resp = await client.post("/", data={"city": "New York"})
            body = await resp.text()
        finally:
            await client.close()
            await provider_server.close()

        assert resp.status == 200
        assert "It&#39;s 55 degrees in New York!" in body
        assert seen == [{"q": "New York", "units": "imperial", "appid": "stub-key"}]
