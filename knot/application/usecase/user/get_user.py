"""Get user use case."""

from uuid import UUID

from pydantic import BaseModel

from knot.application.usecase.base import BaseUseCase
from knot.application.usecase.user.user_info import UserInfoResponse
from knot.domain.service import UserService
from knot.domain.value import UserId


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: UUID


class GetUserUseCase(BaseUseCase):
    """Use case for fetching a user's public information by ID."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserInfoResponse:
        """Execute get user flow.

        Raises:
            UserNotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(request.user_id))
        return UserInfoResponse.from_domain(user)
