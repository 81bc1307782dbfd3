"""Link GitHub account use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from knot.application.usecase.base import BaseUseCase
from knot.domain.service import GithubLinkRequest, UserGithubService
from knot.domain.value import UserId


class LinkGithubAccountRequest(BaseModel):
    """Link GitHub account request.

    `acting_user_id` comes from the authenticated caller; `user_id` is the
    account named in the payload and must match it.
    """

    acting_user_id: UUID
    user_id: UUID
    github_id: int
    github_username: str
    github_access_token: str
    avatar_url: str | None = None


class LinkGithubAccountResponse(BaseModel):
    """Link GitHub account response. The access token is not echoed."""

    user_id: str
    github_id: int
    github_username: str
    avatar_url: str | None
    created_at: datetime
    modified_at: datetime


class LinkGithubAccountUseCase(BaseUseCase):
    """Use case for linking (or relinking) a GitHub account."""

    def __init__(self, user_github_service: UserGithubService) -> None:
        """Initialize link GitHub account use case.

        Args:
            user_github_service: User GitHub domain service
        """
        self.user_github_service = user_github_service

    async def execute(
        self, request: LinkGithubAccountRequest
    ) -> LinkGithubAccountResponse:
        """Execute link flow.

        Raises:
            AccountMismatchError: If the payload names another user
            DuplicateExternalAccountError: If another user owns the GitHub account
        """
        link = await self.user_github_service.link_github_account(
            UserId(request.acting_user_id),
            GithubLinkRequest(
                user_id=UserId(request.user_id),
                github_id=request.github_id,
                github_username=request.github_username,
                github_access_token=request.github_access_token,
                avatar_url=request.avatar_url,
            ),
        )
        return LinkGithubAccountResponse(
            user_id=str(link.user_id),
            github_id=link.github_id,
            github_username=link.github_username,
            avatar_url=link.avatar_url,
            created_at=link.created_at,
            modified_at=link.modified_at,
        )
