# File: qa_auth/repositories/user_repository.py

"""
Credential stores.

AuthService only depends on the UserRepository protocol. Two
implementations live here:
  - SqlAlchemyUserRepository: the users table behind a SQLAlchemy Session
  - InMemoryUserRepository: a dict, for tests and local wiring
"""

import logging
import threading
from typing import Dict, Optional, Protocol

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from qa_auth.core.exceptions import CredentialStoreError, DuplicateUserError
from qa_auth.models.user import UserRow
from qa_auth.schemas.user import User

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> Optional[User]:
        ...

    def save(self, user: User) -> None:
        ...


class SqlAlchemyUserRepository:
    def __init__(self, db: Session):
        if db is None:
            raise ValueError("db session is required")
        self.db = db

    def find_by_email(self, email: str) -> Optional[User]:
        """
        Exact-match lookup. Zero or one row; no case folding.
        """
        stmt = select(UserRow).where(UserRow.email == email)
        try:
            row = self.db.execute(stmt).scalars().first()
        except SQLAlchemyError as exc:
            logger.error("User lookup failed: %s", exc)
            raise CredentialStoreError(f"User lookup failed: {exc}") from exc

        if row is None:
            return None
        return row.to_record()

    def save(self, user: User) -> None:
        stmt = insert(UserRow).values(
            email=user.email,
            password_hash=user.password_hash,
            locked=user.locked,
        )
        try:
            self.db.execute(stmt)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise DuplicateUserError(user.email) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("User insert failed: %s", exc)
            raise CredentialStoreError(f"User insert failed: {exc}") from exc


class InMemoryUserRepository:
    def __init__(self, users: Optional[Dict[str, User]] = None):
        self._users: Dict[str, User] = dict(users or {})
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> Optional[User]:
        return self._users.get(email)

    def save(self, user: User) -> None:
        with self._lock:
            if user.email in self._users:
                raise DuplicateUserError(user.email)
            self._users[user.email] = user
