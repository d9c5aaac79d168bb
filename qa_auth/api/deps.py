# File: qa_auth/api/deps.py

from fastapi import Depends
from sqlalchemy.orm import Session

from qa_auth.core.security import PasswordHasher
from qa_auth.core.security import get_password_hasher as build_password_hasher
from qa_auth.db.session import get_db
from qa_auth.repositories.user_repository import (
    SqlAlchemyUserRepository,
    UserRepository,
)
from qa_auth.services.auth_service import AuthService


def get_password_hasher() -> PasswordHasher:
    return build_password_hasher()


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SqlAlchemyUserRepository(db)


def get_auth_service(
    user_repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(user_repository, password_hasher)
