# ABOUTME: Exception hierarchy for the weather and subscription API.
# ABOUTME: Each error carries the HTTP status and message returned to the client.


class ServiceError(Exception):
    """Base exception for the service.

    Raised by the handler layer and its collaborators; the application
    exception handler renders it as ``{"code": status_code, "message": message}``.
    """

    status_code: int = 500
    default_message: str = "internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(ServiceError):
    """Client-supplied data failed validation."""

    status_code = 400
    default_message = "Invalid input"


class ConflictError(ServiceError):
    """The subscription already exists."""

    status_code = 409
    default_message = "Email already subscribed"


class NotFoundError(ServiceError):
    status_code = 404
    default_message = "Not found"


class CityNotFoundError(NotFoundError):
    """The weather provider does not know the requested city."""

    default_message = "City not found"


class TokenNotFoundError(NotFoundError):
    """No subscription matches the token."""

    default_message = "Token not found"


class StoreError(ServiceError):
    """The subscription store failed to execute a statement."""

    default_message = "database error"


class UpstreamUnavailableError(ServiceError):
    """The weather provider could not be reached."""

    status_code = 502
    default_message = "failed to fetch weather"


class UpstreamError(ServiceError):
    """The weather provider answered with an unexpected status."""

    status_code = 502
    default_message = "weather provider error"


class InvalidUpstreamResponseError(ServiceError):
    """The weather provider returned a body that could not be decoded."""

    status_code = 500
    default_message = "invalid weather response"
