"""User GitHub link repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from knot.domain.model.user_github import UserGithub
from knot.domain.value import UserId


class UserGithubRepository(ABC):
    """Repository for UserGithub entity.

    Manages the link between users and their GitHub accounts.
    """

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[UserGithub]:
        """Find the GitHub link owned by a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_github_id(self, github_id: int) -> Optional[UserGithub]:
        """Find the link for a GitHub account.

        Args:
            github_id: Numeric GitHub account id

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_github_id(self, github_id: int) -> bool:
        """Check if any user has linked the given GitHub account.

        Args:
            github_id: Numeric GitHub account id

        Returns:
            True if a link exists, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, link: UserGithub) -> UserGithub:
        """Save a link (create or update).

        Args:
            link: The link to save

        Returns:
            The saved link, as stored
        """
        pass
