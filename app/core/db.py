"""
Database connection and session management.

Provides SQLAlchemy engines and session factories. FastAPI endpoints use
the async engine; the sync engine backs maintenance scripts.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

logger = logging.getLogger(__name__)

_engine: Engine | None = None
_sessionmaker: sessionmaker | None = None

_async_engine: AsyncEngine | None = None
_async_sessionmaker: async_sessionmaker | None = None


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _engine_options(url: str) -> dict[str, Any]:
    """
    Build keyword arguments for create_engine/create_async_engine.

    SQLite uses a single shared connection (so in-memory databases survive
    across sessions); every other backend gets a sized connection pool.
    """
    if _is_sqlite(url):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
            "echo": settings.db_echo,
        }
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_recycle": settings.db_pool_recycle,
        "pool_pre_ping": True,
        "echo": settings.db_echo,
    }


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ships with FK checks disabled; account.OwnerId relies on them.
    """

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ARG001
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_engine() -> Engine:
    """
    Create and configure the sync SQLAlchemy engine.

    Uses psycopg driver for PostgreSQL. Only scripts use this engine.

    Returns:
        Configured SQLAlchemy engine
    """
    global _engine

    if _engine is not None:
        return _engine

    url = settings.sync_url
    if not url:
        raise RuntimeError("DATABASE_URL_APP is required")

    _engine = create_engine(url, **_engine_options(url))
    if _is_sqlite(url):
        enable_sqlite_foreign_keys(_engine)

    return _engine


def get_sessionmaker() -> sessionmaker:
    global _sessionmaker
    if _sessionmaker is not None:
        return _sessionmaker
    _sessionmaker = sessionmaker(bind=get_engine(), autoflush=False, autocommit=False)
    return _sessionmaker


@contextmanager
def get_db() -> Generator[Session]:
    """
    Context manager for sync database sessions.

    Usage:
        with get_db() as db:
            result = db.execute(select(Owner)).scalars().all()

    Yields:
        Database session
    """
    session_local = get_sessionmaker()
    db = session_local()
    try:
        yield db
    finally:
        db.close()


# ============================================================================
# Async Database Support
# ============================================================================


def create_fresh_async_engine(url: str | None = None) -> AsyncEngine:
    """Create a fresh async engine without caching.

    Used for tests to ensure each test gets its own engine bound to its event loop.
    """
    url = url or settings.async_url
    if not url:
        raise RuntimeError("DATABASE_URL_APP is required")

    engine = create_async_engine(url, **_engine_options(url))
    if _is_sqlite(url):
        enable_sqlite_foreign_keys(engine.sync_engine)
    return engine


def get_async_engine() -> AsyncEngine:
    """
    Create and configure the async SQLAlchemy engine.

    Uses asyncpg driver for PostgreSQL, aiosqlite for SQLite.

    Returns:
        Configured async SQLAlchemy engine
    """
    global _async_engine

    if _async_engine is not None:
        return _async_engine

    _async_engine = create_fresh_async_engine()
    return _async_engine


def get_async_sessionmaker() -> async_sessionmaker[AsyncSession]:
    """
    Get or create the async sessionmaker.

    Returns:
        Async sessionmaker factory
    """
    global _async_sessionmaker
    if _async_sessionmaker is not None:
        return _async_sessionmaker

    _async_sessionmaker = async_sessionmaker(
        bind=get_async_engine(),
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )
    return _async_sessionmaker


async def reset_async_engine() -> None:
    """Reset the async database engine and sessionmaker.

    Called on application shutdown and by tests that need fresh connections.
    """
    global _async_engine, _async_sessionmaker

    if _async_engine is not None:
        await _async_engine.dispose()
    _async_engine = None
    _async_sessionmaker = None


async def create_all(engine: AsyncEngine | None = None) -> None:
    """Create every table declared on the ORM metadata (no-op for existing tables)."""
    from app.db.models import Base

    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema created")


async def drop_all(engine: AsyncEngine | None = None) -> None:
    """Drop every table declared on the ORM metadata."""
    from app.db.models import Base

    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Database schema dropped")
