# File: qa_auth/schemas/user.py

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    Immutable account record.

    The email is kept exactly as stored (no case folding). Changes are made
    by saving a whole new record through the credential store.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    email: str = Field(min_length=1)
    password_hash: str = Field(min_length=1)
    locked: bool = False
