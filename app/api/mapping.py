"""
Entity <-> DTO mapping.

Every mapped field has the same name on both sides, so the forward
direction is a structural conversion through Pydantic's ORM mode.
The reverse direction builds fresh, transient ORM instances.
"""

from collections.abc import Iterable

from app.api.schemas import AccountDto, OwnerDto, OwnerWithAccountsDto
from app.db.models import Account, Owner


def to_account_dto(account: Account) -> AccountDto:
    return AccountDto.model_validate(account)


def to_owner_dto(owner: Owner) -> OwnerDto:
    """Map an owner without touching its accounts relationship."""
    return OwnerDto.model_validate(owner)


def to_owner_dtos(owners: Iterable[Owner]) -> list[OwnerDto]:
    return [to_owner_dto(owner) for owner in owners]


def to_owner_with_accounts_dto(owner: Owner) -> OwnerWithAccountsDto:
    """
    Map an owner together with its accounts.

    The accounts relationship must already be loaded; see
    OwnerRepository.get_owner_with_details.
    """
    return OwnerWithAccountsDto.model_validate(owner)


def to_account_entity(dto: AccountDto) -> Account:
    return Account(
        account_id=dto.account_id,
        date_created=dto.date_created,
        account_type=dto.account_type,
        owner_id=dto.owner_id,
    )


def to_owner_entity(dto: OwnerDto) -> Owner:
    owner = Owner(id=dto.id, name=dto.name, date_created=dto.date_created)
    if isinstance(dto, OwnerWithAccountsDto):
        owner.accounts = [to_account_entity(account) for account in dto.accounts]
    return owner
