# ABOUTME: Database module initialization.
# ABOUTME: Exports the ORM model, repository and engine helpers for the persistence layer.

from weather_service.db.models import Base, Subscription
from weather_service.db.repository import SubscriptionRepository
from weather_service.db.session import close_db, create_engine, create_session_factory

__all__ = [
    "Base",
    "Subscription",
    "SubscriptionRepository",
    "close_db",
    "create_engine",
    "create_session_factory",
]
