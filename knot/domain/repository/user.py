"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from knot.domain.model.user import User
from knot.domain.value import PageRequest, UserId, UserSearchFilter


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email (exact match, as stored).

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_id(self, user_id: UserId) -> bool:
        """Check whether a user with the given ID exists.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if the user exists, False otherwise
        """
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether a user with the given email exists.

        Args:
            email: The email address

        Returns:
            True if a user has this email, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        A user that has never been persisted (no created_at) gets both
        created_at and modified_at assigned by the store.

        Args:
            user: The user to save

        Returns:
            The saved user, as stored
        """
        pass

    @abstractmethod
    async def find_all_by_filter(
        self, search_filter: UserSearchFilter, page: PageRequest
    ) -> list[User]:
        """Find users matching a search filter.

        Results are ordered by name, email, then id (ascending) before the
        page window is applied.

        Args:
            search_filter: Keyword and required-skill criteria
            page: Limit/offset window

        Returns:
            Matching users in the page window (may be empty)
        """
        pass

    @abstractmethod
    async def count_by_filter(self, search_filter: UserSearchFilter) -> int:
        """Count all users matching a search filter, ignoring pagination.

        Args:
            search_filter: Keyword and required-skill criteria

        Returns:
            Number of matching users
        """
        pass
