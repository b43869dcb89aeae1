# ABOUTME: Service layer for weather lookups and subscriptions.
# ABOUTME: Exports WeatherService and SubscriptionService.

from weather_service.services.subscription_service import SubscriptionService
from weather_service.services.weather_service import WeatherService

__all__ = ["SubscriptionService", "WeatherService"]
