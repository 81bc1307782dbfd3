"""User GitHub link domain service."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import logfire

from knot.domain.error import AccountMismatchError, DuplicateExternalAccountError
from knot.domain.model import UserGithub
from knot.domain.repository import UserGithubRepository
from knot.domain.value import UserGithubId, UserId
from knot.util.uuid7 import uuid7

from .base import Service


@dataclass(frozen=True)
class GithubLinkRequest:
    """GitHub identity a user asks to link to their account."""

    user_id: UserId
    github_id: int
    github_username: str
    github_access_token: str
    avatar_url: Optional[str] = None


class UserGithubService(Service):
    """Domain service for linking GitHub accounts to users."""

    def __init__(self, user_github_repository: UserGithubRepository) -> None:
        """Initialize user GitHub service.

        Args:
            user_github_repository: User GitHub link repository
        """
        self.user_github_repository = user_github_repository

    async def link_github_account(
        self, acting_user_id: UserId, request: GithubLinkRequest
    ) -> UserGithub:
        """Link a GitHub account to the acting user.

        Checks run in a fixed order so that an ownership failure reveals
        nothing about other users' links:
        1. The acting user must be the user named in the request
        2. The GitHub account must not be linked to a different user
        3. Create the user's link, or overwrite it if one already exists

        Args:
            acting_user_id: Authenticated user performing the link
            request: GitHub identity to link

        Returns:
            The persisted link

        Raises:
            AccountMismatchError: If the request names another user
            DuplicateExternalAccountError: If another user owns the GitHub account
        """
        with logfire.span(
            "user_github_service.link_github_account",
            user_id=str(acting_user_id),
            github_id=request.github_id,
        ):
            if acting_user_id != request.user_id:
                logfire.warn(
                    "GitHub link for another user rejected",
                    user_id=str(acting_user_id),
                    requested_user_id=str(request.user_id),
                )
                raise AccountMismatchError(str(acting_user_id), str(request.user_id))

            claimed = await self.user_github_repository.find_by_github_id(
                request.github_id
            )
            if claimed and claimed.user_id != acting_user_id:
                logfire.warn(
                    "GitHub account already linked to another user",
                    user_id=str(acting_user_id),
                    github_id=request.github_id,
                )
                raise DuplicateExternalAccountError(request.github_id)

            existing = await self.user_github_repository.find_by_user_id(acting_user_id)
            if existing:
                link = existing.model_copy(
                    update={
                        "github_id": request.github_id,
                        "github_username": request.github_username,
                        "github_access_token": request.github_access_token,
                        "avatar_url": request.avatar_url,
                        "modified_at": datetime.now(timezone.utc),
                    }
                )
                logfire.info(
                    "Relinking GitHub account",
                    user_id=str(acting_user_id),
                    previous_github_id=existing.github_id,
                    github_id=request.github_id,
                )
            else:
                link = UserGithub(
                    id=UserGithubId(uuid7()),
                    user_id=acting_user_id,
                    github_id=request.github_id,
                    github_username=request.github_username,
                    github_access_token=request.github_access_token,
                    avatar_url=request.avatar_url,
                )
                logfire.info(
                    "Linking new GitHub account",
                    user_id=str(acting_user_id),
                    github_id=request.github_id,
                )

            return await self.user_github_repository.save(link)
