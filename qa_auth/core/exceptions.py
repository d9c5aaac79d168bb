# File: qa_auth/core/exceptions.py

"""
Infrastructure errors for the auth service.

Unknown accounts, wrong passwords and locked accounts are NOT errors: they
are ordinary AuthResult outcomes. Only the failures below are raised, and
the service never retries or masks them.
"""


class AuthServiceError(Exception):
    """Base exception for the auth service."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class HasherUnavailableError(AuthServiceError):
    """The configured digest algorithm is missing from this runtime."""


class CredentialStoreError(AuthServiceError):
    """The credential store could not be reached or the query failed."""


class DuplicateUserError(CredentialStoreError):
    """A record with the same email already exists."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User already exists: {email}")
