"""
Single entry point to the entity repositories of one unit of work.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.repos.account_repo import AccountRepository
from app.repos.owner_repo import OwnerRepository

logger = logging.getLogger(__name__)


class RepositoryWrapper:
    """
    Lazily builds and caches one repository per entity.

    All repositories share the wrapper's session, so mutations staged
    through any of them are committed together by `save()`. One wrapper
    lives for one request.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._owner: OwnerRepository | None = None
        self._account: AccountRepository | None = None

    @property
    def owner(self) -> OwnerRepository:
        if self._owner is None:
            self._owner = OwnerRepository(self._session)
        return self._owner

    @property
    def account(self) -> AccountRepository:
        if self._account is None:
            self._account = AccountRepository(self._session)
        return self._account

    async def save(self) -> None:
        """
        Commit every staged mutation as a single transaction.

        Raises:
            SQLAlchemyError: on constraint violations or connectivity loss;
                the session is rolled back first.
        """
        try:
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
