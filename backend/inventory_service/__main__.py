from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

import uvicorn

from inventory_service.core.config import Settings
from inventory_service.main import create_app


logger = logging.getLogger("inventory_service")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inventory_service",
        description="Inventory Service HTTP API",
        # -h is the bind host; help stays available as --help.
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-h", "-H", "--host", help="server host (env: HOST)")
    parser.add_argument("-p", "--port", type=int, help="server port (env: PORT)")
    parser.add_argument("-c", "--cache", help="photo cache directory, created if missing (env: PHOTO_DIR)")
    parser.add_argument("--database-url", help="SQLAlchemy async database URL (env: DATABASE_URL)")
    parser.add_argument("--log-level", help="log level (env: LOG_LEVEL)")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    overrides: dict[str, object] = {}
    if args.host:
        overrides["HOST"] = args.host
    if args.port is not None:
        overrides["PORT"] = args.port
    if args.cache:
        overrides["PHOTO_DIR"] = args.cache
    if args.database_url:
        overrides["DATABASE_URL"] = args.database_url
    if args.log_level:
        overrides["LOG_LEVEL"] = args.log_level
    return Settings(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    app = create_app(settings)

    logger.info("Server running at http://%s:%s", settings.host, settings.port)
    logger.info("Swagger documentation available at http://%s:%s/docs", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
