# ABOUTME: CLI entry point for the weather service.
# ABOUTME: Provides subcommands: serve (default) and migrate.

import argparse
import logging
import sys

import structlog
from pydantic import ValidationError

from weather_service.config import Settings, get_settings


def configure_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """Configure structlog for console or JSON output."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format == "json":
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.add_log_level,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
        )
    else:
        structlog.configure(
            processors=[
                structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
                structlog.processors.add_log_level,
                structlog.dev.ConsoleRenderer(colors=True),
            ],
            wrapper_class=structlog.make_filtering_bound_logger(level),
        )


def load_settings() -> Settings | None:
    """Load settings, logging which required values are missing or invalid."""
    try:
        return get_settings()
    except ValidationError as e:
        configure_logging()
        log = structlog.get_logger()
        fields = [".".join(str(part) for part in err["loc"]).upper() for err in e.errors()]
        log.error("config_invalid", fields=fields, hint="Set DATABASE_URL and OPENWEATHER_API_KEY")
        return None


def cmd_migrate(args: argparse.Namespace, settings: Settings) -> int:
    """Upgrade the database schema to the latest revision."""
    from weather_service.db.migrate import run_migrations

    log = structlog.get_logger()
    try:
        run_migrations(settings, revision=args.revision)
    except Exception:
        log.exception("cmd_migrate_failed")
        return 1
    return 0


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    """Run migrations (unless disabled) and serve the API with uvicorn."""
    import uvicorn

    from weather_service.db.migrate import run_migrations
    from weather_service.web.app import create_app

    log = structlog.get_logger()

    if not args.no_migrate:
        try:
            run_migrations(settings)
        except Exception:
            log.exception("cmd_serve_migrate_failed")
            return 1

    host = args.host or settings.host
    port = args.port or settings.port
    log.info("cmd_serve_start", host=host, port=port)
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="weather_service",
        description="Weather service - weather lookups and email subscriptions",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve the HTTP API",
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        help="Interface to bind. Defaults to HOST or 0.0.0.0.",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on. Defaults to PORT or 8080.",
    )
    serve_parser.add_argument(
        "--no-migrate",
        action="store_true",
        help="Skip database migrations before starting",
    )

    # migrate command
    migrate_parser = subparsers.add_parser(
        "migrate",
        help="Apply database migrations",
    )
    migrate_parser.add_argument(
        "--revision",
        type=str,
        default="head",
        help="Target revision (default: head)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    if settings is None:
        return 1

    configure_logging(settings.log_level, settings.log_format)

    if args.command is None:
        # Default behavior: serve with defaults
        args.host = None
        args.port = None
        args.no_migrate = False
        return cmd_serve(args, settings)

    commands = {
        "serve": cmd_serve,
        "migrate": cmd_migrate,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args, settings)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
