# File: accounts_api/schemas/user.py

from typing import Any, Optional

from pydantic import BaseModel


class Credentials(BaseModel):
    """
    Request body for signup and login.

    Fields are left untyped so missing or non-string values reach the
    service and are rejected there as invalid input (400), not here (422).
    """

    email: Optional[Any] = None
    password: Optional[Any] = None


class UserRead(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True  # Pydantic v2: replaces orm_mode


class SignUpResponse(BaseModel):
    message: str
    user: UserRead

    class Config:
        from_attributes = True


class LoginResponse(SignUpResponse):
    token: str
