"""
FastAPI routes for reading owners and their accounts.

Read-only surface. A missing owner raises NotFoundError (404, empty body);
any other failure is turned into a 500 by the app-level handler.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Path

from app.api.mapping import to_owner_dto, to_owner_dtos, to_owner_with_accounts_dto
from app.api.schemas import OwnerDto, OwnerWithAccountsDto
from app.core.dependencies import Repository
from app.core.errors import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/owner", tags=["Owners"])

OwnerId = Annotated[str, Path(description="Unique owner identifier")]


def _owner_not_found(owner_id: str) -> NotFoundError:
    return NotFoundError(
        f"Owner with id: {owner_id}, hasn't been found in db.",
        details={"owner_id": owner_id},
    )


@router.get(
    "",
    response_model=list[OwnerDto],
    summary="List all owners",
    description="""
    Retrieve every owner, ordered by name.

    **Errors:**
    - 500 Internal Server Error: the store could not be queried
    """,
)
async def get_all_owners(repository: Repository) -> list[OwnerDto]:
    """List all owners."""
    owners = await repository.owner.get_all_owners()
    logger.info("Returned all owners from database.", extra={"count": len(owners)})

    return to_owner_dtos(owners)


@router.get(
    "/{id}",
    response_model=OwnerDto,
    summary="Get a specific owner",
    description="""
    Retrieve a single owner by id.

    **Errors:**
    - 404 Not Found: no owner has this id (empty body)
    - 500 Internal Server Error: the store could not be queried
    """,
    responses={404: {"description": "Owner not found"}},
)
async def get_owner_by_id(id: OwnerId, repository: Repository) -> OwnerDto:
    owner = await repository.owner.get_owner_by_id(id)
    if owner is None:
        raise _owner_not_found(id)

    logger.info(f"Returned owner with id: {id}", extra={"owner_id": id})
    return to_owner_dto(owner)


@router.get(
    "/{id}/account",
    response_model=OwnerWithAccountsDto,
    summary="Get an owner with its accounts",
    description="""
    Retrieve a single owner by id, including all of its accounts.

    **Errors:**
    - 404 Not Found: no owner has this id (empty body)
    - 500 Internal Server Error: the store could not be queried
    """,
    responses={404: {"description": "Owner not found"}},
)
async def get_owner_with_details(id: OwnerId, repository: Repository) -> OwnerWithAccountsDto:
    owner = await repository.owner.get_owner_with_details(id)
    if owner is None:
        raise _owner_not_found(id)

    logger.info(
        f"Returned owner with details for id: {id}",
        extra={"owner_id": id, "account_count": len(owner.accounts)},
    )
    return to_owner_with_accounts_dto(owner)
