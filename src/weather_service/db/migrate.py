# ABOUTME: Programmatic Alembic runner for the subscriptions schema.
# ABOUTME: Used by the `migrate` CLI command and by `serve` before the server starts.

from pathlib import Path

import structlog
from alembic import command
from alembic.config import Config

from weather_service.config import Settings

log = structlog.get_logger()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def make_alembic_config(settings: Settings) -> Config:
    """Build an Alembic config pointing at the bundled migrations."""
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    # ConfigParser interpolation treats % as special
    config.set_main_option("sqlalchemy.url", settings.async_database_url.replace("%", "%%"))
    return config


def run_migrations(settings: Settings, revision: str = "head") -> None:
    """Upgrade the database schema to the given revision."""
    log.info("migrations_start", revision=revision)
    command.upgrade(make_alembic_config(settings), revision)
    log.info("migrations_complete", revision=revision)
