# ABOUTME: Centralized configuration using Pydantic Settings.
# ABOUTME: Loads database URL, weather provider key and server options from the environment.

from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


def make_async_url(url: str) -> str:
    """Rewrite a PostgreSQL URL to use the asyncpg driver.

    Accepts the ``postgres://`` and ``postgresql://`` forms commonly found in
    DATABASE_URL variables and leaves URLs with an explicit driver untouched.
    """
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix) :]
    return url


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str
    db_pool_size: int = 5
    db_pool_max_overflow: int = 10

    # Weather provider
    openweather_api_key: SecretStr
    weather_api_url: str = OPENWEATHER_URL

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    @field_validator("database_url")
    @classmethod
    def _database_url_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("DATABASE_URL must not be empty")
        return value

    @field_validator("openweather_api_key")
    @classmethod
    def _api_key_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("OPENWEATHER_API_KEY must not be empty")
        return value

    @property
    def async_database_url(self) -> str:
        """Database URL with the asyncpg driver, for the engine and Alembic."""
        return make_async_url(self.database_url)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises pydantic.ValidationError when DATABASE_URL or OPENWEATHER_API_KEY
    is missing, which the CLI reports as a startup failure.
    """
    return Settings()
