"""
Pydantic schemas for Owner API responses.

OwnerDto is the flat projection returned by list and lookup endpoints.
OwnerWithAccountsDto adds the eagerly loaded accounts.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.api.schemas.account import AccountDto


class OwnerDto(BaseModel):
    """Transport shape of an Owner without its accounts."""

    id: str = Field(
        ...,
        description="Unique owner identifier",
        examples=["1"],
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=60,
        description="Owner display name",
        examples=["Alice"],
    )
    date_created: datetime = Field(
        ...,
        description="Timestamp when the owner was registered",
    )

    model_config = {
        "from_attributes": True,  # Enable ORM mode for SQLAlchemy models
        "json_schema_extra": {
            "examples": [
                {
                    "id": "1",
                    "name": "Alice",
                    "date_created": "2024-01-15T09:30:00Z",
                }
            ]
        },
    }


class OwnerWithAccountsDto(OwnerDto):
    """Owner projection including its accounts."""

    accounts: list[AccountDto] = Field(
        default_factory=list,
        description="Accounts held by the owner, oldest first",
    )
