"""User search domain service."""

from dataclasses import dataclass
from typing import Optional

import logfire

from knot.domain.model import User
from knot.domain.repository import UserRepository
from knot.domain.value import PageRequest, SkillId, UserSearchFilter

from .base import Service


@dataclass
class UserSearchResult:
    """One page of search results plus the size of the full match set."""

    users: list[User]
    total: int


class UserSearchService(Service):
    """Domain service for keyword and skill filtered user search."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user search service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def search_users(
        self,
        keyword: Optional[str],
        skill_ids: Optional[list[SkillId]],
        page: PageRequest,
    ) -> UserSearchResult:
        """Search users by keyword and required skills.

        A blank keyword or an empty skill list disables that predicate.
        A user matches the keyword when it occurs in the name or the email,
        and matches the skills when tagged with every one of them.

        Args:
            keyword: Optional substring to look for
            skill_ids: Optional skills a user must all have
            page: Limit/offset window

        Returns:
            Page of users ordered by name, email, id and the total match count
        """
        search_filter = UserSearchFilter.build(keyword, skill_ids)
        with logfire.span(
            "user_search_service.search_users",
            keyword_enabled=search_filter.keyword_enabled,
            skill_count=len(search_filter.required_skill_ids),
            limit=page.limit,
            offset=page.offset,
        ):
            users = await self.user_repository.find_all_by_filter(search_filter, page)
            total = await self.user_repository.count_by_filter(search_filter)
            logfire.info("Users searched", count=len(users), total=total)
            return UserSearchResult(users=users, total=total)
