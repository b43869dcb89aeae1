# ABOUTME: Repository for the subscriptions table.
# ABOUTME: Each operation runs one statement in its own transaction and reports failures as StoreError.

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import structlog
from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from weather_service.db.models import Subscription, new_uuid
from weather_service.errors import StoreError

log = structlog.get_logger()


class SubscriptionRepository:
    """Repository for Subscription existence checks, inserts, confirmations and deletes.

    Exists and insert are separate transactions, so two concurrent subscribe
    calls for the same (email, city) can both pass the existence check.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncGenerator[AsyncSession]:
        """Open a session, commit on success and convert database failures to StoreError."""
        try:
            async with self.session_factory() as session, session.begin():
                yield session
        except (SQLAlchemyError, OSError) as e:
            log.error("store_error", operation=operation, error=str(e))
            raise StoreError(f"{operation} failed") from e

    async def exists(self, email: str, city: str) -> bool:
        """Check whether a subscription for the exact (email, city) pair exists."""
        async with self._transaction("exists") as session:
            result = await session.execute(
                select(
                    exists().where(Subscription.email == email).where(Subscription.city == city)
                )
            )
            return bool(result.scalar())

    async def insert(self, email: str, city: str, frequency: str) -> str:
        """Insert an unconfirmed subscription and return its token."""
        subscription = Subscription(
            id=new_uuid(),
            email=email,
            city=city,
            frequency=frequency,
            token=new_uuid(),
            confirmed=False,
            created_at=datetime.now(UTC),
        )
        async with self._transaction("insert") as session:
            session.add(subscription)
            await session.flush()
        return subscription.token

    async def confirm(self, token: str) -> int:
        """Mark the subscription with this token as confirmed.

        Returns:
            Number of rows matched (0 or 1). Already confirmed rows still match.
        """
        async with self._transaction("confirm") as session:
            result = await session.execute(
                update(Subscription)
                .where(Subscription.token == token)
                .values(confirmed=True)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount

    async def delete(self, token: str) -> int:
        """Delete the subscription with this token.

        Returns:
            Number of rows removed (0 or 1).
        """
        async with self._transaction("delete") as session:
            result = await session.execute(
                delete(Subscription)
                .where(Subscription.token == token)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount
