# File: accounts_api/core/errors.py

"""
Error kinds raised by the account service and the user store.

Every error is terminal for the current request. The HTTP layer maps each
kind to a fixed status code; the message is short and safe to return to
callers.
"""


class AccountError(Exception):
    """Base class for account errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(AccountError):
    """Malformed email or password."""


class Conflict(AccountError):
    """Email already registered."""


class NotFound(AccountError):
    """No such user, or no users at all."""


class Unauthorized(AccountError):
    """Password does not match the stored hash."""


class StorageError(AccountError):
    """Persistence failure not otherwise classified."""
