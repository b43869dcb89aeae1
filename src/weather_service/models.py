# ABOUTME: Pydantic models for API payloads and weather provider responses.
# ABOUTME: Defines Frequency, SubscribeRequest, WeatherResult and the response schemas.

from enum import Enum

from pydantic import BaseModel, StrictFloat, StrictStr, TypeAdapter


class Frequency(str, Enum):
    """How often a subscriber wants weather updates."""

    HOURLY = "hourly"
    DAILY = "daily"


class SubscribeRequest(BaseModel):
    """Normalized subscribe request, built from either form fields or JSON."""

    email: StrictStr = ""
    city: StrictStr = ""
    frequency: StrictStr = ""


class SubscribeResponse(BaseModel):
    message: str
    token: str


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response; ``code`` mirrors the HTTP status."""

    code: int
    message: str


class WeatherResult(BaseModel):
    """Weather reshaped into the service's stable schema."""

    temperature: float
    humidity: float
    description: str


class ProviderMain(BaseModel):
    temp: StrictFloat | None = None
    humidity: StrictFloat | None = None


class ProviderCondition(BaseModel):
    description: StrictStr | None = None


class ProviderWeather(BaseModel):
    """Subset of the OpenWeatherMap current weather payload.

    JSON nulls stand for absent values; numbers must be JSON numbers and
    descriptions JSON strings.
    """

    main: ProviderMain | None = None
    weather: list[ProviderCondition | None] | None = None

    def to_result(self) -> WeatherResult:
        main = self.main or ProviderMain()
        first = self.weather[0] if self.weather else None
        return WeatherResult(
            temperature=main.temp or 0.0,
            humidity=main.humidity or 0.0,
            description=(first.description or "") if first else "",
        )


# A top-level JSON null decodes to an empty payload.
PROVIDER_PAYLOAD = TypeAdapter(ProviderWeather | None)
