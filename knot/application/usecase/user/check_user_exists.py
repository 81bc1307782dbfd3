"""Check user existence use case."""

from uuid import UUID

from pydantic import BaseModel, model_validator

from knot.application.usecase.base import BaseUseCase
from knot.domain.service import UserService
from knot.domain.value import UserId


class CheckUserExistsRequest(BaseModel):
    """Existence check by user ID or by email (exactly one)."""

    user_id: UUID | None = None
    email: str | None = None

    @model_validator(mode="after")
    def exactly_one_key(self) -> "CheckUserExistsRequest":
        """Require exactly one lookup key."""
        if (self.user_id is None) == (self.email is None):
            raise ValueError("Provide exactly one of user_id or email")
        return self


class CheckUserExistsResponse(BaseModel):
    """Check user existence response."""

    exists: bool


class CheckUserExistsUseCase(BaseUseCase):
    """Use case for other services checking that a user or email exists."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize check user exists use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CheckUserExistsRequest) -> CheckUserExistsResponse:
        """Execute existence check."""
        if request.user_id is not None:
            exists = await self.user_service.exists(UserId(request.user_id))
        else:
            exists = await self.user_service.email_exists(request.email)
        return CheckUserExistsResponse(exists=exists)
