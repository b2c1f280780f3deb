"""
Repository layer for data access operations.

RepositoryBase holds the generic query/mutation primitives; the entity
repositories add entity-specific reads; RepositoryWrapper hands them out
over one shared session per request.
"""

from app.repos.account_repo import AccountRepository as AccountRepository
from app.repos.base import RepositoryBase as RepositoryBase
from app.repos.owner_repo import OwnerRepository as OwnerRepository
from app.repos.wrapper import RepositoryWrapper as RepositoryWrapper
