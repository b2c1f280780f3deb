"""
Repository for Owner entities.
"""

import logging

from sqlalchemy.orm import selectinload

from app.db.models import Owner
from app.repos.base import RepositoryBase

logger = logging.getLogger(__name__)


class OwnerRepository(RepositoryBase[Owner]):
    model = Owner

    async def get_all_owners(self) -> list[Owner]:
        """
        Retrieve all owners.

        Returns:
            List of Owner models ordered by name (ascending)
        """
        owners = await self.all(self.find_all().order_by(Owner.name))
        logger.debug(f"Retrieved {len(owners)} owners")
        return owners

    async def get_owner_by_id(self, owner_id: str) -> Owner | None:
        """
        Retrieve a single owner by id.

        Returns:
            Owner model, or None if no owner has that id
        """
        return await self.first(self.find_by_condition(Owner.id == owner_id))

    async def get_owner_with_details(self, owner_id: str) -> Owner | None:
        """
        Retrieve a single owner with its accounts loaded.

        Accounts are fetched eagerly (selectinload), so the returned,
        detached owner can be serialized without further queries.

        Returns:
            Owner model with `accounts` populated, or None if not found
        """
        stmt = self.find_by_condition(Owner.id == owner_id).options(
            selectinload(Owner.accounts)
        )
        return await self.first(stmt)
