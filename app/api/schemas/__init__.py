"""
Pydantic schemas for API request/response validation.

This package contains the transport shapes (DTOs) of the persisted
entities exposed by the API.
"""

# Re-export schemas for convenient imports.
from .account import AccountDto as AccountDto
from .owner import OwnerDto as OwnerDto
from .owner import OwnerWithAccountsDto as OwnerWithAccountsDto
