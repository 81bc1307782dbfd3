"""Update user use case."""

from uuid import UUID

from pydantic import BaseModel

from knot.application.usecase.base import BaseUseCase
from knot.application.usecase.user.user_info import UserInfoResponse
from knot.domain.service import UserService, UserUpdate
from knot.domain.value import UserId


class UpdateUserRequest(BaseModel):
    """Update user request.

    Every profile field is optional; None leaves the stored value alone.
    """

    user_id: UUID  # From the authenticated user
    name: str | None = None
    position: str | None = None
    detailed_position: str | None = None
    career_level: str | None = None
    profile_image_url: str | None = None
    description: str | None = None
    github_link: str | None = None


class UpdateUserUseCase(BaseUseCase):
    """Use case for partially updating a user's profile.

    Email and password cannot be changed through this use case.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserInfoResponse:
        """Execute update user flow.

        Args:
            request: User ID and fields to overwrite

        Returns:
            Updated user information

        Raises:
            UserNotFoundError: If user not found
            ValidationFailedError: If position or career level is unknown
        """
        update = UserUpdate(
            name=request.name,
            position=request.position,
            detailed_position=request.detailed_position,
            career_level=request.career_level,
            profile_image_url=request.profile_image_url,
            description=request.description,
            github_link=request.github_link,
        )
        user = await self.user_service.update_user(UserId(request.user_id), update)
        return UserInfoResponse.from_domain(user)
