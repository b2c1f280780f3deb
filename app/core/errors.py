"""
Domain-specific exceptions for the Account Owner API.

These exceptions represent expected failure kinds and are mapped
to HTTP status codes in the API layer. Anything else is an
unexpected failure and becomes a 500.
"""

from typing import Any


class AccountOwnerError(Exception):
    """Base exception for all account owner domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AccountOwnerError):
    """
    Raised when a requested resource does not exist.

    Examples:
    - Owner ID not found

    HTTP Status: 404 Not Found
    """

    pass


# HTTP Status Code Mapping
ERROR_STATUS_MAP = {
    NotFoundError: 404,
}


def get_status_code(error: Exception) -> int:
    """
    Get the HTTP status code for a given exception.

    Args:
        error: The exception instance

    Returns:
        HTTP status code (defaults to 500 for unknown errors)
    """
    return ERROR_STATUS_MAP.get(type(error), 500)
