# File: qa_auth/services/auth_service.py

"""
Authentication service.

Decides the outcome of one login attempt:
  - look up the account by email
  - locked accounts short-circuit to LOCKED before the password is checked
  - otherwise compare the password against the stored hash

Unknown account and wrong password are both INVALID. Store and hasher
failures propagate to the caller untouched.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from qa_auth.core.security import PasswordHasher, get_password_hasher
from qa_auth.repositories.user_repository import (
    SqlAlchemyUserRepository,
    UserRepository,
)
from qa_auth.schemas.auth import AuthResult

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        if user_repository is None:
            raise ValueError("user_repository is required")
        if password_hasher is None:
            raise ValueError("password_hasher is required")
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    def authenticate(self, email: str, password: str) -> AuthResult:
        user = self.user_repository.find_by_email(email)
        if user is None:
            result = AuthResult.invalid()
        elif user.locked:
            # The hasher must not run for locked accounts
            result = AuthResult.locked(user)
        elif self.password_hasher.matches(password, user.password_hash):
            result = AuthResult.success(user)
        else:
            result = AuthResult.invalid()

        logger.debug("Authentication attempt resolved to %s", result.status.value)
        return result


def authenticate_user(
    db: Session,
    *,
    email: str,
    password: str,
    password_hasher: Optional[PasswordHasher] = None,
) -> AuthResult:
    """
    Authenticate against the users table reachable through ``db``.

    Uses the configured hasher unless one is passed in.
    """
    service = AuthService(
        SqlAlchemyUserRepository(db),
        password_hasher or get_password_hasher(),
    )
    return service.authenticate(email=email, password=password)
