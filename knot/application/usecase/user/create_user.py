"""Create user use case."""

from pydantic import BaseModel

from knot.application.usecase.base import BaseUseCase
from knot.application.usecase.user.user_info import UserInfoResponse
from knot.domain.service import UserService


class CreateUserRequest(BaseModel):
    """Create user request."""

    email: str
    password: str
    name: str
    profile_image_url: str | None = None
    description: str | None = None
    github_link: str | None = None


class CreateUserUseCase(BaseUseCase):
    """Use case for registering a new user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserInfoResponse:
        """Execute registration.

        Args:
            request: Registration data

        Returns:
            Public information of the created user

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        user = await self.user_service.create_user(
            email=request.email,
            password=request.password,
            name=request.name,
            profile_image_url=request.profile_image_url,
            description=request.description,
            github_link=request.github_link,
        )
        return UserInfoResponse.from_domain(user)
