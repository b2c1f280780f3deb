"""
Repository for Account entities.

Only the generic primitives are needed so far, e.g.:

    repo.all(repo.find_by_condition(Account.account_type == "Domestic"))
"""

from app.db.models import Account
from app.repos.base import RepositoryBase


class AccountRepository(RepositoryBase[Account]):
    model = Account
