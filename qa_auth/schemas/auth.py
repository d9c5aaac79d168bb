# File: qa_auth/schemas/auth.py

"""
Authentication outcome and login payloads.

AuthResult is a tagged union: a status plus an optional user. SUCCESS and
LOCKED always carry the resolved user, INVALID never does. Unknown account
and wrong password both map to INVALID so callers cannot tell them apart.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

from qa_auth.schemas.user import User


class AuthStatus(str, Enum):
    SUCCESS = "SUCCESS"
    LOCKED = "LOCKED"
    INVALID = "INVALID"


class AuthResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: AuthStatus
    user: Optional[User] = None

    @model_validator(mode="after")
    def check_user_payload(self):
        if self.status is AuthStatus.INVALID:
            if self.user is not None:
                raise ValueError("INVALID results carry no user")
        elif self.user is None:
            raise ValueError(f"{self.status.value} results require a user")
        return self

    @classmethod
    def success(cls, user: User) -> "AuthResult":
        return cls(status=AuthStatus.SUCCESS, user=user)

    @classmethod
    def locked(cls, user: User) -> "AuthResult":
        return cls(status=AuthStatus.LOCKED, user=user)

    @classmethod
    def invalid(cls) -> "AuthResult":
        return cls(status=AuthStatus.INVALID)

    @property
    def is_success(self) -> bool:
        return self.status is AuthStatus.SUCCESS


# ---------- HTTP payloads ----------

class LoginRequest(BaseModel):
    # Not EmailStr: addresses are matched exactly as stored
    email: str
    password: str


class LoginResponse(BaseModel):
    status: AuthStatus
    email: str
