# ABOUTME: Subscription routes for the weather update signup flow.
# ABOUTME: Handles subscribe (form or JSON body), confirm, and unsubscribe actions.

import structlog
from fastapi import APIRouter, Request
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from weather_service.errors import InvalidInputError
from weather_service.models import MessageResponse, SubscribeRequest, SubscribeResponse
from weather_service.web.dependencies import SubscriptionSvc

router = APIRouter(prefix="/api", tags=["subscriptions"])
log = structlog.get_logger()

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
FORM_FIELDS = ("email", "city", "frequency")


async def parse_subscribe_request(request: Request) -> SubscribeRequest:
    """Normalize a subscribe request body into a SubscribeRequest.

    Form values (query string, overridden by a form-encoded body) are used when
    they carry a non-empty email. Anything else is decoded as a JSON object.

    Raises:
        InvalidInputError: If the fallback JSON body cannot be decoded.
    """
    # Cache the body first so both the form parser and the JSON decoder can read it.
    body = await request.body()

    form: dict[str, str] = {key: request.query_params.get(key, "") for key in FORM_FIELDS}
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        try:
            body_form = await request.form()
        except StarletteHTTPException:
            log.debug("subscribe_form_unparseable", content_type=content_type)
        else:
            for key in FORM_FIELDS:
                value = body_form.get(key)
                if isinstance(value, str):
                    form[key] = value

    if form["email"]:
        return SubscribeRequest(**form)

    try:
        return SubscribeRequest.model_validate_json(body)
    except ValidationError as e:
        raise InvalidInputError("Invalid input") from e


@router.post("/subscribe", response_model=SubscribeResponse)
async def subscribe(request: Request, service: SubscriptionSvc) -> SubscribeResponse:
    """Subscribe an email to weather updates for a city."""
    subscribe_request = await parse_subscribe_request(request)
    token = await service.subscribe(subscribe_request)
    return SubscribeResponse(
        message="Subscription successful. Confirmation email sent.",
        token=token,
    )


@router.get("/confirm/{token}", response_model=MessageResponse)
async def confirm(token: str, service: SubscriptionSvc) -> MessageResponse:
    """Confirm email subscription."""
    await service.confirm(token)
    return MessageResponse(message="Subscription confirmed successfully")


@router.get("/unsubscribe/{token}", response_model=MessageResponse)
async def unsubscribe(token: str, service: SubscriptionSvc) -> MessageResponse:
    """Remove a subscription."""
    await service.unsubscribe(token)
    return MessageResponse(message="Unsubscribed successfully")
