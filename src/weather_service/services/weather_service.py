# ABOUTME: Client for the OpenWeatherMap current weather endpoint.
# ABOUTME: Maps provider responses and transport failures onto the service error taxonomy.

import httpx
import structlog
from pydantic import ValidationError

from weather_service.errors import (
    CityNotFoundError,
    InvalidInputError,
    InvalidUpstreamResponseError,
    UpstreamError,
    UpstreamUnavailableError,
)
from weather_service.models import PROVIDER_PAYLOAD, ProviderWeather, WeatherResult

log = structlog.get_logger()


class WeatherService:
    """Looks up current weather for a city through the external provider.

    Every call opens a fresh client and makes exactly one request; nothing is
    cached or retried.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.transport = transport

    async def get_weather(self, city: str) -> WeatherResult:
        """Fetch the current weather for a city.

        Args:
            city: City name as typed by the user.

        Returns:
            Temperature (metric), humidity and the first condition description.

        Raises:
            InvalidInputError: If city is empty.
            CityNotFoundError: If the provider does not know the city.
            UpstreamError: If the provider answers with any other non-200 status.
            UpstreamUnavailableError: If the provider cannot be reached.
            InvalidUpstreamResponseError: If a 200 body cannot be decoded.
        """
        if not city:
            raise InvalidInputError("city parameter is required")

        params = {"q": city, "appid": self.api_key, "units": "metric"}

        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(self.base_url, params=params)
        except httpx.HTTPError as e:
            log.warning("weather_upstream_unavailable", city=city, error=str(e))
            raise UpstreamUnavailableError() from e

        if response.status_code == httpx.codes.NOT_FOUND:
            log.info("weather_city_not_found", city=city)
            raise CityNotFoundError()

        if response.status_code != httpx.codes.OK:
            status_text = f"{response.status_code} {response.reason_phrase}".strip()
            log.warning("weather_upstream_error", city=city, status=response.status_code)
            raise UpstreamError(f"weather provider returned {status_text}")

        try:
            payload = PROVIDER_PAYLOAD.validate_json(response.content) or ProviderWeather()
        except ValidationError as e:
            log.warning("weather_invalid_response", city=city, error=str(e))
            raise InvalidUpstreamResponseError() from e

        result = payload.to_result()
        log.info("weather_lookup", city=city, temperature=result.temperature)
        return result
