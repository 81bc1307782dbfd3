"""In-memory user repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from knot.domain.model.user import User
from knot.domain.repository.user import UserRepository
from knot.domain.value import PageRequest, SkillId, UserId, UserSearchFilter


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        # (user_id, skill_id) rows; duplicates allowed like the real table
        self._skills: list[tuple[UserId, SkillId]] = []

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def exists_by_id(self, user_id: UserId) -> bool:
        """Check whether a user with the given ID exists."""
        return user_id in self._users

    async def exists_by_email(self, email: str) -> bool:
        """Check whether a user with the given email exists."""
        return await self.find_by_email(email) is not None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        if user.is_new:
            now = datetime.now(timezone.utc)
            user = user.model_copy(update={"created_at": now, "modified_at": now})
        self._users[user.id] = user
        return user

    async def find_all_by_filter(
        self, search_filter: UserSearchFilter, page: PageRequest
    ) -> list[User]:
        """Find users matching a filter, ordered by name, email, id.

        Ordering follows the store's collation: plain codepoint order here,
        where PostgreSQL uses the database collation.
        """
        matches = [u for u in self._users.values() if self._matches(u, search_filter)]
        matches.sort(key=lambda u: (u.name, u.email, u.id))
        return matches[page.offset : page.offset + page.limit]

    async def count_by_filter(self, search_filter: UserSearchFilter) -> int:
        """Count users matching a filter."""
        return sum(1 for u in self._users.values() if self._matches(u, search_filter))

    def tag_skill(self, user_id: UserId, skill_id: SkillId) -> None:
        """Associate a skill with a user (test seeding helper)."""
        self._skills.append((user_id, skill_id))

    def _matches(self, user: User, search_filter: UserSearchFilter) -> bool:
        if search_filter.keyword_enabled:
            keyword = search_filter.keyword
            if keyword not in user.name and keyword not in user.email:
                return False

        if search_filter.skills_enabled:
            held = {skill for owner, skill in self._skills if owner == user.id}
            if not search_filter.required_skill_ids <= held:
                return False

        return True
