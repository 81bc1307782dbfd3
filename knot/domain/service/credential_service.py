"""Credential verification domain service."""

import logfire

from knot.domain.error import UserNotFoundError, WrongPasswordError
from knot.domain.repository import UserRepository
from knot.domain.value import UserId

from .base import Service
from .password import PasswordEncoder


class CredentialService(Service):
    """Domain service for checking email/password credentials."""

    def __init__(
        self, user_repository: UserRepository, password_encoder: PasswordEncoder
    ) -> None:
        """Initialize credential service.

        Args:
            user_repository: User repository
            password_encoder: One-way password hash/verify capability
        """
        self.user_repository = user_repository
        self.password_encoder = password_encoder

    async def verify_credentials(self, email: str, password: str) -> UserId:
        """Verify an email/password pair.

        The email is matched exactly as stored; no normalization happens here.

        Args:
            email: Account email
            password: Plaintext password

        Returns:
            ID of the user owning the credentials

        Raises:
            UserNotFoundError: If no user has this email
            WrongPasswordError: If the password does not match
        """
        with logfire.span("credential_service.verify_credentials"):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("Credential check for unknown email")
                raise UserNotFoundError(email)

            if not self.password_encoder.matches(password, user.password):
                logfire.warn("Credential check failed", user_id=str(user.id))
                raise WrongPasswordError()

            logfire.info("Credentials verified", user_id=str(user.id))
            return user.id
