"""
SQLAlchemy 2.x ORM models for the Account Owner API.

Models use the Mapped[] type annotation syntax and mapped_column.
Column names keep the PascalCase names of the existing `owner` and
`account` tables; Python attributes are snake_case.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all ORM models."""


class Owner(Base):
    """
    A person or organisation holding zero or more accounts.

    `name` is required; deleting an owner removes its accounts.
    """

    __tablename__ = "owner"

    id: Mapped[str] = mapped_column("Id", String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column("Name", String(60), nullable=False)
    date_created: Mapped[datetime] = mapped_column(
        "DateCreated", DateTime(timezone=True), nullable=False, default=_utcnow
    )

    # Relationships
    accounts: Mapped[list[Account]] = relationship(
        "Account",
        back_populates="owner",
        cascade="all, delete-orphan",
        order_by="Account.date_created",
    )

    def __repr__(self) -> str:
        return f"<Owner(id={self.id}, name={self.name})>"


class Account(Base):
    """An account belonging to exactly one owner."""

    __tablename__ = "account"

    account_id: Mapped[str] = mapped_column(
        "AccountId", String(36), primary_key=True, default=_new_id
    )
    date_created: Mapped[datetime] = mapped_column(
        "DateCreated", DateTime(timezone=True), nullable=False, default=_utcnow
    )
    account_type: Mapped[str] = mapped_column("AccountType", String(45), nullable=False)
    owner_id: Mapped[str] = mapped_column(
        "OwnerId", String(36), ForeignKey("owner.Id"), nullable=False
    )

    # Relationships
    owner: Mapped[Owner] = relationship("Owner", back_populates="accounts")

    def __repr__(self) -> str:
        return (
            f"<Account(account_id={self.account_id}, account_type={self.account_type}, "
            f"owner_id={self.owner_id})>"
        )
