"""Search users use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from knot.application.usecase.base import BaseUseCase
from knot.application.usecase.user.user_info import UserInfoResponse
from knot.config import SearchSettings
from knot.domain.service import UserSearchService
from knot.domain.value import PageRequest, SkillId


class SearchUsersRequest(BaseModel):
    """Search users request."""

    query: str | None = None  # Substring of name or email
    skills: list[UUID] = Field(default_factory=list)  # Users must have all of them
    limit: int | None = Field(default=None, ge=1)  # Defaults from settings
    offset: int = Field(default=0, ge=0)


class SearchUsersResponse(BaseModel):
    """Search users response."""

    users: list[UserInfoResponse]
    total: int
    limit: int
    offset: int


class SearchUsersUseCase(BaseUseCase):
    """Use case for keyword and skill filtered, paginated user search."""

    def __init__(
        self, user_search_service: UserSearchService, settings: SearchSettings
    ) -> None:
        """Initialize search users use case.

        Args:
            user_search_service: User search domain service
            settings: Page size defaults and cap
        """
        self.user_search_service = user_search_service
        self.settings = settings

    async def execute(self, request: SearchUsersRequest) -> SearchUsersResponse:
        """Execute search.

        The page size falls back to the configured default and is capped at
        the configured maximum.

        Args:
            request: Keyword, skills and page window

        Returns:
            Page of matching users with the total match count
        """
        limit = min(
            request.limit or self.settings.default_limit, self.settings.max_limit
        )
        result = await self.user_search_service.search_users(
            keyword=request.query,
            skill_ids=[SkillId(skill) for skill in request.skills],
            page=PageRequest(limit=limit, offset=request.offset),
        )
        return SearchUsersResponse(
            users=[UserInfoResponse.from_domain(user) for user in result.users],
            total=result.total,
            limit=limit,
            offset=request.offset,
        )
