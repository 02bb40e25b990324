"""Run the weather form server."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from aiohttp import web

from .config import load_config
from .errors import ConfigLoadError
from .web import create_app

_LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="weather_lookup", description=__doc__)
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--port", type=int, help="override the listening port")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigLoadError as err:
        parser.error(str(err))
    if args.port is not None:
        config = replace(config, port=args.port)

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = create_app(config)
    _LOGGER.info("App listening on port %d!", config.port)
    web.run_app(app, host=config.host, port=config.port, print=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
