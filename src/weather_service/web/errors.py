# ABOUTME: Exception handlers rendering every failure as {"code", "message"} JSON.
# ABOUTME: Covers service errors, framework HTTP errors and request validation errors.

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from weather_service.errors import ServiceError
from weather_service.models import ErrorResponse

log = structlog.get_logger()


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response whose code matches the HTTP status."""
    body = ErrorResponse(code=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error(
            "request_failed",
            path=request.url.path,
            status=exc.status_code,
            error=exc.message,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
        )
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    log.debug("request_validation_failed", path=request.url.path, errors=exc.errors())
    return error_response(400, "Invalid input")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an application."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
