"""aiohttp web application serving the weather form."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from pathlib import Path

import aiohttp
import jinja2
from aiohttp import web

from .config import WeatherConfig
from .http import OpenWeatherMapClient
from .lookup import WeatherLookupHandler
from .result import LookupResult, render_context

_LOGGER = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

CONFIG_KEY = web.AppKey("config", WeatherConfig)
HANDLER_KEY = web.AppKey("handler", WeatherLookupHandler)
TEMPLATES_KEY = web.AppKey("templates", jinja2.Environment)


def _render(request: web.Request, result: LookupResult | None) -> web.Response:
    template = request.app[TEMPLATES_KEY].get_template("index.html")
    return web.Response(
        text=template.render(**render_context(result)),
        content_type="text/html",
    )


async def index(request: web.Request) -> web.Response:
    """Render the empty form."""
    return _render(request, None)


async def submit(request: web.Request) -> web.Response:
    """Look up the submitted city and render the outcome."""
    form = await request.post()
    city = form.get("city", "")
    if not isinstance(city, str):
        city = ""
    result = await request.app[HANDLER_KEY].lookup(city)
    return _render(request, result)


async def _provider_session(app: web.Application) -> AsyncIterator[None]:
    config = app[CONFIG_KEY]
    async with aiohttp.ClientSession() as session:
        client = OpenWeatherMapClient(
            session,
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
        )
        app[HANDLER_KEY] = WeatherLookupHandler(client)
        _LOGGER.debug("Provider session opened for %s", config.base_url)
        yield
    _LOGGER.debug("Provider session closed")


def create_app(
    config: WeatherConfig,
    handler: WeatherLookupHandler | None = None,
) -> web.Application:
    """Build the web application.

    Args:
        config: Loaded configuration.
        handler: Lookup handler to use. When omitted, one backed by a
            shared ``aiohttp.ClientSession`` is created on startup and the
            session is closed on cleanup.
    """
    app = web.Application()
    app[CONFIG_KEY] = config
    app[TEMPLATES_KEY] = jinja2.Environment(
        loader=jinja2.PackageLoader("weather_lookup", "templates"),
        autoescape=jinja2.select_autoescape(),
    )
    if handler is None:
        app.cleanup_ctx.append(_provider_session)
    else:
        app[HANDLER_KEY] = handler

    app.router.add_get("/", index)
    app.router.add_post("/", submit)
    app.router.add_static("/static", STATIC_DIR)
    return app
