# File: accounts_api/api/deps.py

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from accounts_api.db.session import get_db
from accounts_api.services.account_service import AccountService
from accounts_api.services.user_store import UserStore


def get_account_service(
    request: Request,
    db: Session = Depends(get_db),
) -> AccountService:
    """
    FastAPI dependency that provides an AccountService bound to the
    request's database session and the application's signing settings.

    Usage in route functions:
        service: AccountService = Depends(get_account_service)
    """
    settings = request.app.state.settings
    return AccountService(
        UserStore(db),
        settings.jwt_secret,
        token_expire_minutes=settings.access_token_expire_minutes,
    )
