"""
Run the API server.

Usage:
    python -m app [--host HOST] [--port PORT] [--reload]

Host and port default to the HOST / PORT settings.
"""

import argparse
import logging

import uvicorn

from app.core.config import settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="app", description=settings.project_name)
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Listen port")
    parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes (development)"
    )
    return parser


def main() -> None:
    args = build_parser().parse_args()
    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
