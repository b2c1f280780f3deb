"""
FastAPI dependency injection utilities.

Provides the per-request database session and the repository wrapper
built on top of it.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_sessionmaker
from app.repos.wrapper import RepositoryWrapper

# ============================================================================
# Database Dependencies
# ============================================================================


async def get_async_db_session() -> AsyncGenerator[AsyncSession]:
    """
    Async database session dependency for FastAPI endpoints.

    The session is closed when the request finishes. Nothing is committed
    implicitly; writers call RepositoryWrapper.save().

    Yields:
        Async SQLAlchemy database session
    """
    session_maker = get_async_sessionmaker()
    async with session_maker() as session:
        yield session


# Type alias for async database session dependency
AsyncDbSession = Annotated[AsyncSession, Depends(get_async_db_session)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_repository(db: AsyncDbSession) -> RepositoryWrapper:
    """Build the request-scoped repository wrapper."""
    return RepositoryWrapper(db)


Repository = Annotated[RepositoryWrapper, Depends(get_repository)]
