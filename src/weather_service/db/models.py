# ABOUTME: SQLAlchemy ORM models for subscription persistence.
# ABOUTME: Defines the subscriptions table used by the subscribe/confirm/unsubscribe flow.

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, Index, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def new_uuid() -> str:
    """Random identifier in canonical UUID text form."""
    return str(uuid4())


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class Subscription(Base):
    """A weather subscription for one (email, city) pair, gated by a confirmation token.

    The (email, city) pair is checked for uniqueness before insert rather than
    by a table constraint.
    """

    __tablename__ = "subscriptions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    city: Mapped[str] = mapped_column(String(200), nullable=False)
    frequency: Mapped[str] = mapped_column(String(16), nullable=False)
    token: Mapped[str] = mapped_column(String(36), unique=True, nullable=False, default=new_uuid)
    confirmed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC)
    )

    __table_args__ = (Index("ix_subscriptions_email_city", "email", "city"),)

    def __repr__(self) -> str:
        status = "confirmed" if self.confirmed else "pending"
        return f"<Subscription {self.email} {self.city} {self.frequency} ({status})>"
