# ABOUTME: Async database engine and session factory construction for SQLAlchemy.
# ABOUTME: The application owns the engine; nothing here is held in module globals.

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from weather_service.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async database engine (connection pool) from settings."""
    return create_async_engine(
        settings.async_database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_pool_max_overflow,
        pool_pre_ping=True,
        echo=settings.log_level.upper() == "DEBUG",
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory bound to an engine."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def close_db(engine: AsyncEngine) -> None:
    """Close the database engine and release pooled connections."""
    await engine.dispose()
