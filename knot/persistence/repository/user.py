"""PostgreSQL implementation of User repository."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Select, distinct, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from knot.domain.model import User
from knot.domain.repository import UserRepository
from knot.domain.value import PageRequest, UserId, UserSearchFilter
from knot.persistence.mappers import row_to_user, user_to_dict
from knot.persistence.tables import user_skills_table, users_table


def apply_search_filter(stmt: Select, search_filter: UserSearchFilter) -> Select:
    """Translate a search filter into WHERE clauses on the users table.

    - Keyword: LIKE '%keyword%' on name OR email, with % and _ escaped
    - Skills: correlated EXISTS over user_skills, grouped per user, keeping
      users whose count of distinct requested skills equals the set size

    Args:
        stmt: SELECT over users_table
        search_filter: Filter to apply

    Returns:
        The statement with the enabled predicates added
    """
    if search_filter.keyword_enabled:
        keyword = search_filter.keyword
        stmt = stmt.where(
            or_(
                users_table.c.name.contains(keyword, autoescape=True),
                users_table.c.email.contains(keyword, autoescape=True),
            )
        )

    if search_filter.skills_enabled:
        skill_ids = list(search_filter.required_skill_ids)
        has_all_skills = (
            select(user_skills_table.c.user_id)
            .where(
                user_skills_table.c.user_id == users_table.c.id,
                user_skills_table.c.skill_id.in_(skill_ids),
            )
            .group_by(user_skills_table.c.user_id)
            .having(func.count(distinct(user_skills_table.c.skill_id)) == len(skill_ids))
        )
        stmt = stmt.where(has_all_skills.exists())

    return stmt


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def exists_by_id(self, user_id: UserId) -> bool:
        """Check whether a user with the given ID exists."""
        stmt = select(users_table.c.id).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def exists_by_email(self, email: str) -> bool:
        """Check whether a user with the given email exists."""
        stmt = select(users_table.c.id).where(users_table.c.email == email)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        if user.is_new:
            now = datetime.now(timezone.utc)
            user = user.model_copy(update={"created_at": now, "modified_at": now})
        elif user.modified_at is None:
            user = user.model_copy(update={"modified_at": user.created_at})

        user_dict = user_to_dict(user)

        if await self.exists_by_id(user.id):
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return user

    async def find_all_by_filter(
        self, search_filter: UserSearchFilter, page: PageRequest
    ) -> list[User]:
        """Find users matching a filter, ordered by name, email, id.

        Args:
            search_filter: Keyword and required-skill criteria
            page: Limit/offset window

        Returns:
            Matching users in the page window
        """
        stmt = apply_search_filter(select(users_table), search_filter)
        stmt = (
            stmt.order_by(users_table.c.name, users_table.c.email, users_table.c.id)
            .limit(page.limit)
            .offset(page.offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def count_by_filter(self, search_filter: UserSearchFilter) -> int:
        """Count users matching a filter, ignoring pagination.

        Args:
            search_filter: Keyword and required-skill criteria

        Returns:
            Number of matching users
        """
        stmt = apply_search_filter(
            select(func.count()).select_from(users_table), search_filter
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
