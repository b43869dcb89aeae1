# ABOUTME: Weather lookup route proxied to the external provider.
# ABOUTME: GET /api/weather?city= returns temperature, humidity and description.

from fastapi import APIRouter

from weather_service.models import WeatherResult
from weather_service.web.dependencies import WeatherSvc

router = APIRouter(prefix="/api", tags=["weather"])


@router.get("/weather", response_model=WeatherResult)
async def get_weather(service: WeatherSvc, city: str = "") -> WeatherResult:
    """Get current weather for a city."""
    return await service.get_weather(city)
