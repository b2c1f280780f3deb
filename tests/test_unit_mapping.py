"""Tests for entity <-> DTO mapping."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from app.api.mapping import (
    to_account_dto,
    to_account_entity,
    to_owner_dto,
    to_owner_dtos,
    to_owner_entity,
    to_owner_with_accounts_dto,
)
from app.api.schemas import AccountDto, OwnerDto, OwnerWithAccountsDto
from app.db.models import Account, Owner

CREATED = datetime(2024, 1, 15, 9, 30, tzinfo=UTC)


def _owner_with_accounts() -> Owner:
    owner = Owner(id="1", name="Alice", date_created=CREATED)
    owner.accounts = [
        Account(account_id="a1", account_type="Domestic", owner_id="1", date_created=CREATED),
        Account(account_id="a2", account_type="Foreign", owner_id="1", date_created=CREATED),
    ]
    return owner


class TestEntityToDto:
    def test_owner_dto_copies_every_mapped_field(self):
        dto = to_owner_dto(Owner(id="1", name="Alice", date_created=CREATED))

        assert dto == OwnerDto(id="1", name="Alice", date_created=CREATED)

    def test_owner_dto_has_no_accounts(self):
        dto = to_owner_dto(_owner_with_accounts())

        assert "accounts" not in dto.model_dump()

    def test_owner_dtos_keep_order(self):
        owners = [
            Owner(id="1", name="Alice", date_created=CREATED),
            Owner(id="2", name="Bob", date_created=CREATED),
        ]

        assert [d.id for d in to_owner_dtos(owners)] == ["1", "2"]

    def test_owner_with_accounts_dto_nests_accounts(self):
        dto = to_owner_with_accounts_dto(_owner_with_accounts())

        assert [a.account_id for a in dto.accounts] == ["a1", "a2"]
        assert all(a.owner_id == "1" for a in dto.accounts)

    def test_account_dto_has_no_owner_back_reference(self):
        account = Account(
            account_id="a1", account_type="Domestic", owner_id="1", date_created=CREATED
        )
        account.owner = Owner(id="1", name="Alice", date_created=CREATED)

        dumped = to_account_dto(account).model_dump()

        assert dumped == {
            "account_id": "a1",
            "date_created": CREATED,
            "account_type": "Domestic",
            "owner_id": "1",
        }

    def test_owner_without_name_fails_validation(self):
        with pytest.raises(ValidationError):
            to_owner_dto(Owner(id="1", name="", date_created=CREATED))


class TestRoundTrip:
    def test_owner_round_trip_preserves_fields(self):
        dto = OwnerDto(id="1", name="Alice", date_created=CREATED)

        assert to_owner_dto(to_owner_entity(dto)) == dto

    def test_owner_with_accounts_round_trip_preserves_fields(self):
        dto = OwnerWithAccountsDto(
            id="1",
            name="Alice",
            date_created=CREATED,
            accounts=[
                AccountDto(
                    account_id="a1",
                    date_created=CREATED,
                    account_type="Domestic",
                    owner_id="1",
                )
            ],
        )

        assert to_owner_with_accounts_dto(to_owner_entity(dto)) == dto

    def test_account_round_trip_preserves_fields(self):
        dto = AccountDto(
            account_id="a1", date_created=CREATED, account_type="Savings", owner_id="7"
        )

        assert to_account_dto(to_account_entity(dto)) == dto
