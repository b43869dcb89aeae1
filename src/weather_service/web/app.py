# ABOUTME: FastAPI application factory with database engine lifespan.
# ABOUTME: Main entry point for the weather service HTTP API.

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from weather_service import __version__
from weather_service.config import Settings, get_settings
from weather_service.db.session import close_db, create_engine, create_session_factory
from weather_service.web.errors import register_exception_handlers
from weather_service.web.routes import health, pages, subscriptions, weather

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan context for database setup/teardown."""
    logger.info("app_startup")
    engine = create_engine(app.state.settings)
    app.state.session_factory = create_session_factory(engine)
    yield
    logger.info("app_shutdown")
    await close_db(engine)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Weather Service",
        description="Weather lookups and email subscriptions for weather updates",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()

    register_exception_handlers(app)

    app.include_router(weather.router)
    app.include_router(subscriptions.router)
    app.include_router(health.router)
    app.include_router(pages.router)

    # Mount static files
    app.mount("/static", StaticFiles(directory=str(pages.STATIC_DIR)), name="static")

    return app
