# File: accounts_api/core/security.py

"""
Password hashing and access token signing.

Passwords are hashed with bcrypt (salted, fixed work factor). Tokens are
HS256 JWTs carrying only the stringified user id.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import bcrypt
import jwt

ALGORITHM = "HS256"
BCRYPT_ROUNDS = 10
# bcrypt only reads the first 72 bytes; recent releases reject longer input
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode()[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt (auto-salted, work factor 10)."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-work comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def create_access_token(
    subject_id: str,
    secret: str,
    *,
    expires_minutes: Optional[int] = None,
) -> str:
    """
    Sign a token for ``subject_id``.

    The payload holds ``id`` and ``iat``, plus ``exp`` when
    ``expires_minutes`` is given.
    """
    if not secret:
        raise ValueError("jwt_secret_blank")

    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "id": subject_id,
        "iat": int(now.timestamp()),
    }
    if expires_minutes:
        payload["exp"] = int((now + timedelta(minutes=expires_minutes)).timestamp())
    return jwt.encode(payload, secret, algorithm=ALGORITHM)
