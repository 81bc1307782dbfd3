"""Verify credentials use case."""

from pydantic import BaseModel

from knot.application.usecase.base import BaseUseCase
from knot.domain.service import CredentialService


class VerifyCredentialsRequest(BaseModel):
    """Verify credentials request."""

    email: str
    password: str


class VerifyCredentialsResponse(BaseModel):
    """Verify credentials response."""

    user_id: str


class VerifyCredentialsUseCase(BaseUseCase):
    """Use case for checking an email/password pair.

    Used by the auth gateway before it issues its own tokens; this service
    keeps no session state.
    """

    def __init__(self, credential_service: CredentialService) -> None:
        """Initialize verify credentials use case.

        Args:
            credential_service: Credential domain service
        """
        self.credential_service = credential_service

    async def execute(
        self, request: VerifyCredentialsRequest
    ) -> VerifyCredentialsResponse:
        """Execute credential verification.

        Raises:
            UserNotFoundError: If no user has the email
            WrongPasswordError: If the password does not match
        """
        user_id = await self.credential_service.verify_credentials(
            request.email, request.password
        )
        return VerifyCredentialsResponse(user_id=str(user_id))
