"""
Pytest configuration and shared fixtures.

Provides:
- In-memory SQLite database (aiosqlite) per test, schema created from the ORM
- Async session factory / session fixtures
- FastAPI app and httpx AsyncClient wired to the test database
- Helpers that insert owners and accounts and commit them
"""

from __future__ import annotations

import os
import sys
from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# Add app to path for imports
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Set test environment variables before importing app
os.environ.setdefault("DATABASE_URL_APP", "sqlite+aiosqlite://")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("OBSERVABILITY_STRUCTURED_LOGS", "false")

import httpx  # noqa: E402 (import after env setup)
import pytest  # noqa: E402 (import after env setup)
from fastapi import FastAPI  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from app.core.db import create_fresh_async_engine  # noqa: E402
from app.core.dependencies import get_async_db_session  # noqa: E402
from app.db.models import Account, Base, Owner  # noqa: E402
from app.main import create_app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# =============================================================================
# AnyIO Backend Configuration
# =============================================================================
@pytest.fixture
def anyio_backend():
    return "asyncio"


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine]:
    """
    Fresh in-memory database with the full schema.

    The engine holds a single shared connection, so every session opened
    on it sees the same data; disposing it throws the database away.
    """
    engine = create_fresh_async_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def async_session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
async def async_db_session(
    async_session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    async with async_session_factory() as session:
        yield session


# =============================================================================
# App / Client Fixtures
# =============================================================================


@pytest.fixture
def app(async_session_factory: async_sessionmaker[AsyncSession]) -> FastAPI:
    """Application whose request sessions come from the test database."""
    application = create_app()

    async def override_get_async_db():
        async with async_session_factory() as session:
            yield session

    application.dependency_overrides[get_async_db_session] = override_get_async_db
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient]:
    """AsyncClient over ASGITransport."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# =============================================================================
# Data Helpers
# =============================================================================


async def acreate_owner_in_db(
    session: AsyncSession,
    *,
    owner_id: str,
    name: str,
    date_created: datetime | None = None,
) -> Owner:
    """Insert and commit an owner; the returned instance is detached."""
    owner = Owner(
        id=owner_id,
        name=name,
        date_created=date_created or datetime(2024, 1, 15, 9, 30, tzinfo=UTC),
    )
    session.add(owner)
    await session.commit()
    session.expunge(owner)
    return owner


async def acreate_account_in_db(
    session: AsyncSession,
    *,
    account_id: str,
    owner_id: str,
    account_type: str = "Domestic",
    date_created: datetime | None = None,
) -> Account:
    """Insert and commit an account; the returned instance is detached."""
    account = Account(
        account_id=account_id,
        owner_id=owner_id,
        account_type=account_type,
        date_created=date_created or datetime(2024, 2, 1, 12, 0, tzinfo=UTC),
    )
    session.add(account)
    await session.commit()
    session.expunge(account)
    return account
