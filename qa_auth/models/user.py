# File: qa_auth/models/user.py

"""
UserRow model.

One row per account. The email primary key is what rejects duplicate
registrations; the lock flag is maintained outside this service and only
read here.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from qa_auth.models.base import Base
from qa_auth.schemas.user import User


class UserRow(Base):
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), primary_key=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    locked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def to_record(self) -> User:
        return User(
            email=self.email,
            password_hash=self.password_hash,
            locked=self.locked,
        )
