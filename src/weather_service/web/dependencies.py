# ABOUTME: FastAPI dependency injection for settings, repository and services.
# ABOUTME: Builds collaborators from the state the application lifespan stores on app.state.

from typing import Annotated

from fastapi import Depends, Request

from weather_service.config import Settings
from weather_service.db.repository import SubscriptionRepository
from weather_service.services.subscription_service import SubscriptionService
from weather_service.services.weather_service import WeatherService


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


def get_subscription_repository(request: Request) -> SubscriptionRepository:
    """Get subscription repository bound to the application's session factory."""
    return SubscriptionRepository(request.app.state.session_factory)


SubscriptionRepo = Annotated[SubscriptionRepository, Depends(get_subscription_repository)]


def get_subscription_service(repo: SubscriptionRepo) -> SubscriptionService:
    """Get subscription service instance."""
    return SubscriptionService(repo)


SubscriptionSvc = Annotated[SubscriptionService, Depends(get_subscription_service)]


def get_weather_service(settings: AppSettings) -> WeatherService:
    """Get weather service configured with the provider URL and API key."""
    return WeatherService(
        api_key=settings.openweather_api_key.get_secret_value(),
        base_url=settings.weather_api_url,
    )


WeatherSvc = Annotated[WeatherService, Depends(get_weather_service)]
