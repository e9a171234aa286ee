# File: accounts_api/api/v1/routes_users.py

"""
User account routes: signup, login and list.

Route prefix: /api/v1/users
"""

from fastapi import APIRouter, Depends, HTTPException, status

from accounts_api.api.deps import get_account_service
from accounts_api.core.errors import (
    AccountError,
    Conflict,
    InvalidInput,
    NotFound,
    StorageError,
    Unauthorized,
)
from accounts_api.schemas.user import Credentials, LoginResponse, SignUpResponse, UserRead
from accounts_api.services.account_service import AccountService

router = APIRouter()

# Duplicate emails are a 400, not a 409, for compatibility with existing clients
_STATUS_BY_ERROR = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    Conflict: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    Unauthorized: status.HTTP_401_UNAUTHORIZED,
}


def _to_http(exc: AccountError) -> HTTPException:
    if isinstance(exc, StorageError):
        # driver details stay in the logs
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
    return HTTPException(status_code=_STATUS_BY_ERROR[type(exc)], detail=exc.message)


@router.post(
    "/signup",
    response_model=SignUpResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user account",
)
def sign_up(
    payload: Credentials,
    service: AccountService = Depends(get_account_service),
):
    try:
        return service.sign_up(payload.email, payload.password)
    except AccountError as exc:
        raise _to_http(exc)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Log in and receive an access token",
)
def login(
    payload: Credentials,
    service: AccountService = Depends(get_account_service),
):
    try:
        return service.login(payload.email, payload.password)
    except AccountError as exc:
        raise _to_http(exc)


@router.get(
    "",
    response_model=list[UserRead],
    summary="List all users",
)
def list_users(service: AccountService = Depends(get_account_service)):
    """
    Return every user without password hashes.

    Responds 404 when no users exist.
    """
    try:
        return service.list_users()
    except AccountError as exc:
        raise _to_http(exc)
