"""Run the API server: `python -m app [--host HOST] [--port PORT]`."""

import argparse
import sys
from typing import Optional, Sequence

import uvicorn

from app.core.config import get_settings
from app.server import AppServer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="event-api", description="Run the Event Management API server.")
    parser.add_argument("--host", default=None, help="Bind address (default: HOST setting)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: PORT setting)")
    return parser


def build_config(host: Optional[str] = None, port: Optional[int] = None) -> uvicorn.Config:
    settings = get_settings()
    return uvicorn.Config(
        "app.main:app",
        host=host or settings.HOST,
        port=port if port is not None else settings.PORT,
        # Logging is configured in the app lifespan; keep uvicorn from overriding it
        log_config=None,
    )


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """
    Start uvicorn and block until the process is stopped.

    uvicorn exits the process with status 1 if the port cannot be bound.
    """
    AppServer(build_config(host, port)).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
