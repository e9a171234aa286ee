# File: accounts_api/services/account_service.py

"""
Account service: signup, login and user listing.

Each operation validates its input first and fails fast without touching
the store, then runs a single lookup -> act sequence. Failures are raised
as the error kinds in ``accounts_api.core.errors`` and never retried.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from accounts_api.core.errors import Conflict, InvalidInput, NotFound, Unauthorized
from accounts_api.core.security import create_access_token, hash_password, verify_password
from accounts_api.core.validation import is_email_valid, is_password_valid
from accounts_api.models.user import User
from accounts_api.services.user_store import UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PublicUser:
    """A user record without its password hash."""

    id: int
    email: str

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls(id=user.id, email=user.email)


@dataclass(frozen=True)
class SignUpResult:
    message: str
    user: PublicUser


@dataclass(frozen=True)
class LoginResult:
    message: str
    user: PublicUser
    token: str


def _validate_credentials(email: str, password: str) -> None:
    if not is_email_valid(email):
        raise InvalidInput("Invalid email")
    if not is_password_valid(password):
        raise InvalidInput("Invalid password")


class AccountService:
    def __init__(
        self,
        store: UserStore,
        secret: str,
        *,
        token_expire_minutes: Optional[int] = None,
    ):
        if not secret:
            raise ValueError("jwt_secret_blank")
        self.store = store
        self._secret = secret
        self._token_expire_minutes = token_expire_minutes

    def sign_up(self, email: str, password: str) -> SignUpResult:
        _validate_credentials(email, password)

        if self.store.find_by_email(email) is not None:
            logger.info("Signup rejected, email already registered")
            raise Conflict("Email already exists")

        user = self.store.create(email, hash_password(password))
        logger.info("Created user %s", user.id)
        return SignUpResult(message="User created successfully", user=PublicUser.from_user(user))

    def login(self, email: str, password: str) -> LoginResult:
        _validate_credentials(email, password)

        user = self.store.find_by_email(email)
        if user is None:
            raise NotFound("User does not exist")

        if not verify_password(password, user.password):
            logger.warning("Failed login for user %s", user.id)
            raise Unauthorized("Invalid credentials")

        token = create_access_token(
            str(user.id),
            self._secret,
            expires_minutes=self._token_expire_minutes,
        )
        logger.info("User %s logged in", user.id)
        return LoginResult(
            message="User logged in successfully",
            user=PublicUser.from_user(user),
            token=token,
        )

    def list_users(self) -> List[User]:
        """
        Return every stored user.

        An empty table is reported as ``NotFound`` rather than an empty list;
        existing clients depend on the 404.
        """
        users = self.store.list_all()
        if not users:
            raise NotFound("No users found")
        return users
