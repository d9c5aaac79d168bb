# File: qa_auth/core/security.py

"""
Password hashing for the auth service.

The stored format is the lowercase hex SHA-256 digest of the UTF-8 encoded
password, with no salt and no work factor. This matches the hashes already
in the users table. It is a known weakness (precomputed tables, fast offline
guessing); moving to a salted KDF changes the stored format and needs a
migration, so it is not done here.
"""

import hashlib
import logging
from typing import Protocol

from qa_auth.core.config import settings
from qa_auth.core.exceptions import HasherUnavailableError

logger = logging.getLogger(__name__)


class PasswordHasher(Protocol):
    def hash(self, raw_password: str) -> str:
        ...

    def matches(self, raw_password: str, stored_hash: str) -> bool:
        ...


class Sha256PasswordHasher:
    """
    Deterministic digest hasher.

    The algorithm is resolved once here; a runtime without it, or an
    algorithm that does not give a fixed 64-char hex digest, fails at
    construction instead of on every login.

    Characters UTF-8 cannot encode (lone surrogates) are hashed as "?".
    """

    DIGEST_HEX_LENGTH = 64

    def __init__(self, algorithm: str = "sha256"):
        try:
            empty_digest = hashlib.new(algorithm).hexdigest()
        except (ValueError, TypeError) as exc:
            logger.critical("Digest algorithm %r is unavailable", algorithm)
            raise HasherUnavailableError(
                f"{algorithm} unavailable"
            ) from exc
        if len(empty_digest) != self.DIGEST_HEX_LENGTH:
            logger.critical("Digest algorithm %r gives %d hex chars", algorithm, len(empty_digest))
            raise HasherUnavailableError(
                f"{algorithm} unavailable: expected a {self.DIGEST_HEX_LENGTH}-char hex digest"
            )
        self.algorithm = algorithm

    def hash(self, raw_password: str) -> str:
        encoded = raw_password.encode("utf-8", errors="replace")
        digest = hashlib.new(self.algorithm, encoded)
        return digest.hexdigest()

    def matches(self, raw_password: str, stored_hash: str) -> bool:
        return self.hash(raw_password) == stored_hash


def get_password_hasher() -> PasswordHasher:
    return Sha256PasswordHasher(settings.password_hash_algorithm)
