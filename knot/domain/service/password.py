"""Password encoding port."""


class PasswordEncoder:
    """One-way password hashing interface.

    Implementations never recover plaintext; verification re-hashes the
    candidate and compares.
    """

    def encode(self, raw_password: str) -> str:
        """Hash a plaintext password.

        Args:
            raw_password: Plaintext password

        Returns:
            Encoded hash suitable for storage
        """
        raise NotImplementedError

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        """Check a plaintext password against a stored hash.

        Args:
            raw_password: Plaintext password to check
            encoded_password: Hash previously produced by encode()

        Returns:
            True if the password matches the hash
        """
        raise NotImplementedError
