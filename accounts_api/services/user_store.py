# File: accounts_api/services/user_store.py

"""
Persistence of user records in the ``users`` table.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from accounts_api.core.errors import Conflict, StorageError
from accounts_api.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, password_hash: str) -> User:
        """
        Insert a user and return the persisted row with its generated id.

        A UNIQUE violation on ``email`` (e.g. two concurrent signups that
        both passed the existence check) is raised as ``Conflict``.
        """
        user = User(email=email, password=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Duplicate email rejected by the database")
            raise Conflict("Email already exists")
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to insert user")
            raise StorageError("Could not save user") from exc

        self.db.refresh(user)
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        try:
            return self.db.scalars(select(User).where(User.email == email)).one_or_none()
        except SQLAlchemyError as exc:
            logger.exception("Failed to look up user by email")
            raise StorageError("Could not read users") from exc

    def list_all(self) -> List[User]:
        try:
            return list(self.db.scalars(select(User).order_by(User.id)))
        except SQLAlchemyError as exc:
            logger.exception("Failed to list users")
            raise StorageError("Could not read users") from exc
