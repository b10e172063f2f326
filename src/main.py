"""Main entry point for the add bid service.

Provides CLI interface for running the HTTP server.

Usage:
    # Serve with config from the environment / .env
    python -m src.main serve

    # Serve with overrides
    python -m src.main serve --port 8080 --log-level debug --seed 42
"""

import argparse
import logging

import uvicorn

from src.api.app import create_app
from src.api.config import AppConfig, app_config
from src.api.log_config import setup_logging

logger = logging.getLogger(__name__)


def resolve_config(args: argparse.Namespace, base: AppConfig = app_config) -> AppConfig:
    """Apply CLI overrides on top of the environment-derived config."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
        "random_seed": args.seed,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if not overrides:
        return base
    # re-validate so overrides go through the same checks as env values
    return AppConfig.model_validate({**base.model_dump(), **overrides})


def serve(args: argparse.Namespace) -> None:
    """Run the HTTP server."""
    config = resolve_config(args)
    setup_logging(config.log_level)

    logger.info("Starting add service on %s:%d", config.host, config.port)
    uvicorn.run(
        create_app(config=config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Add Bid Service")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", type=str, help="Bind address (overrides config)")
    serve_parser.add_argument("--port", type=int, help="Bind port (overrides config)")
    serve_parser.add_argument("--log-level", type=str, help="Log level (overrides config)")
    serve_parser.add_argument("--seed", type=int, help="Seed for bid prices (overrides config)")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        serve(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
