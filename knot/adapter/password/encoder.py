"""bcrypt password encoder.

bcrypt only looks at the first 72 bytes of a password; longer inputs are
rejected rather than silently truncated.
"""

import hashlib

import bcrypt
import logfire

from knot.adapter.error import PasswordHashError
from knot.domain.service.password import PasswordEncoder

BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordEncoder(PasswordEncoder):
    """Password encoder backed by bcrypt."""

    def __init__(self, rounds: int = 12) -> None:
        """Initialize bcrypt encoder.

        Args:
            rounds: bcrypt cost factor (log2 of the iteration count)
        """
        self.rounds = rounds

    def encode(self, raw_password: str) -> str:
        """Hash a password with a fresh salt."""
        password_bytes = raw_password.encode("utf-8")
        if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
            raise PasswordHashError(
                f"Password exceeds {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode("utf-8")

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        """Check a password against a bcrypt hash.

        A stored value that is not a bcrypt hash never matches.
        """
        password_bytes = raw_password.encode("utf-8")
        if len(password_bytes) > BCRYPT_MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(password_bytes, encoded_password.encode("utf-8"))
        except ValueError:
            logfire.warn("Stored password is not a bcrypt hash")
            return False


class MockPasswordEncoder(PasswordEncoder):
    """Mock password encoder for testing.

    Uses unsalted SHA-256 so hashes are fast and deterministic, but still
    never equal to the plaintext.
    """

    PREFIX = "mock-sha256$"

    def encode(self, raw_password: str) -> str:
        """Return a deterministic hash."""
        digest = hashlib.sha256(raw_password.encode("utf-8")).hexdigest()
        return f"{self.PREFIX}{digest}"

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        """Compare against a hash produced by encode()."""
        return self.encode(raw_password) == encoded_password
