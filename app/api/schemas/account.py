"""
Pydantic schemas for Account API responses.

AccountDto carries the owner's id but no nested owner object, so an
owner serialized with its accounts never loops back on itself.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class AccountDto(BaseModel):
    """Transport shape of an Account."""

    account_id: str = Field(
        ...,
        description="Unique account identifier",
        examples=["a1"],
    )
    date_created: datetime = Field(
        ...,
        description="Timestamp when the account was opened",
    )
    account_type: str = Field(
        ...,
        min_length=1,
        max_length=45,
        description="Free-form account type",
        examples=["Domestic"],
    )
    owner_id: str = Field(
        ...,
        description="Identifier of the owning Owner",
        examples=["1"],
    )

    model_config = {
        "from_attributes": True,  # Enable ORM mode for SQLAlchemy models
        "json_schema_extra": {
            "examples": [
                {
                    "account_id": "a1",
                    "date_created": "2024-01-15T09:30:00Z",
                    "account_type": "Domestic",
                    "owner_id": "1",
                }
            ]
        },
    }
