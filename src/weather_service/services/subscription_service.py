# ABOUTME: Service for managing weather subscriptions.
# ABOUTME: Validates requests and drives subscribe, confirm and unsubscribe against the repository.

import re

import structlog

from weather_service.db.repository import SubscriptionRepository
from weather_service.errors import (
    ConflictError,
    InvalidInputError,
    StoreError,
    TokenNotFoundError,
)
from weather_service.models import Frequency, SubscribeRequest

log = structlog.get_logger()

TOKEN_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def is_valid_token(token: str) -> bool:
    """Check that a token has the canonical 8-4-4-4-12 hex UUID shape."""
    return bool(token) and TOKEN_PATTERN.fullmatch(token) is not None


def _redact(token: str) -> str:
    return token[:8] + "..."


class SubscriptionService:
    """Service for the subscription workflow."""

    def __init__(self, repo: SubscriptionRepository) -> None:
        self.repo = repo

    async def subscribe(self, request: SubscribeRequest) -> str:
        """Create an unconfirmed subscription.

        Args:
            request: Normalized subscribe request.

        Returns:
            The confirmation/unsubscribe token.

        Raises:
            InvalidInputError: If a field is empty or frequency is unknown.
            ConflictError: If the (email, city) pair is already subscribed.
            StoreError: If the existence check or insert fails.
        """
        if not request.email or not request.city or not request.frequency:
            raise InvalidInputError("Invalid input")
        if request.frequency not in {f.value for f in Frequency}:
            raise InvalidInputError("frequency must be hourly or daily")

        try:
            exists = await self.repo.exists(request.email, request.city)
        except StoreError as e:
            raise StoreError("failed to check existing subscription") from e

        if exists:
            log.info("subscribe_duplicate", email=request.email, city=request.city)
            raise ConflictError("Email already subscribed")

        try:
            token = await self.repo.insert(request.email, request.city, request.frequency)
        except StoreError as e:
            raise StoreError("failed to save subscription") from e

        log.info(
            "subscription_created",
            email=request.email,
            city=request.city,
            frequency=request.frequency,
        )
        return token

    async def confirm(self, token: str) -> None:
        """Confirm the subscription identified by token.

        Confirming twice succeeds both times.
        """
        if not is_valid_token(token):
            raise InvalidInputError("Invalid token")

        try:
            affected = await self.repo.confirm(token)
        except StoreError as e:
            raise StoreError("failed to confirm subscription") from e

        if affected == 0:
            log.warning("confirm_invalid_token", token=_redact(token))
            raise TokenNotFoundError("Token not found")

        log.info("subscription_confirmed", token=_redact(token))

    async def unsubscribe(self, token: str) -> None:
        """Delete the subscription identified by token."""
        if not is_valid_token(token):
            raise InvalidInputError("Invalid token")

        try:
            affected = await self.repo.delete(token)
        except StoreError as e:
            raise StoreError("failed to unsubscribe") from e

        if affected == 0:
            log.warning("unsubscribe_invalid_token", token=_redact(token))
            raise TokenNotFoundError("Token not found")

        log.info("unsubscribed", token=_redact(token))
