"""In-memory user GitHub link repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from knot.domain.model.user_github import UserGithub
from knot.domain.repository.user_github import UserGithubRepository
from knot.domain.value import UserId


class InMemoryUserGithubRepository(UserGithubRepository):
    """In-memory implementation of UserGithubRepository for testing."""

    def __init__(self) -> None:
        self._links: list[UserGithub] = []

    async def save(self, link: UserGithub) -> UserGithub:
        """Save a GitHub link."""
        if link.created_at is None:
            now = datetime.now(timezone.utc)
            link = link.model_copy(update={"created_at": now, "modified_at": now})

        # Check for existing link with same ID (update case)
        for i, existing in enumerate(self._links):
            if existing.id == link.id:
                self._links[i] = link
                return link

        self._links.append(link)
        return link

    async def find_by_user_id(self, user_id: UserId) -> Optional[UserGithub]:
        """Find the link owned by a user."""
        for link in self._links:
            if link.user_id == user_id:
                return link
        return None

    async def find_by_github_id(self, github_id: int) -> Optional[UserGithub]:
        """Find the link for a GitHub account."""
        for link in self._links:
            if link.github_id == github_id:
                return link
        return None

    async def exists_by_github_id(self, github_id: int) -> bool:
        """Check if a GitHub account is linked."""
        return await self.find_by_github_id(github_id) is not None

    def count(self) -> int:
        """Number of stored links (test helper)."""
        return len(self._links)
