"""Process entry point: load configuration, set up logging, serve HTTP.

Usage:
    location-eta [--config conf.json] [--host 0.0.0.0] [--port 8080]
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import uvicorn

from .api import create_app
from .config import AppConfig, get_config
from .container import Container
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="location-eta",
        description="Track order positions and publish travel-time estimates.",
    )
    parser.add_argument(
        "--config",
        help="Path to a legacy conf.json with RedisUrl/MapsApiKey",
    )
    parser.add_argument("--host", help="Bind address (overrides LETA_SERVER_HOST)")
    parser.add_argument(
        "--port", type=int, help="Listen port (overrides LETA_SERVER_PORT)"
    )
    return parser


def load_config(config_path: Optional[str]) -> AppConfig:
    if config_path:
        return AppConfig.from_json_file(config_path)
    return get_config()


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_logging(config.observability)

    host = args.host or config.server.host
    port = args.port or config.server.port

    container = Container.create_default(config)
    app = create_app(container)

    logger.info(
        "Server listening",
        extra={
            "host": host,
            "port": port,
            "store_backend": config.store.backend,
            "publisher": config.publisher.kind,
        },
    )
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
