# File: accounts_api/models/user.py

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from accounts_api.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # UNIQUE is the authoritative guard against duplicate signups
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    # bcrypt hash, never the plaintext
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"
