"""PostgreSQL implementation of UserGithub repository."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from knot.domain.model import UserGithub
from knot.domain.repository import UserGithubRepository
from knot.domain.value import UserId
from knot.persistence.mappers import row_to_user_github, user_github_to_dict
from knot.persistence.tables import user_github_table


class PostgresUserGithubRepository(UserGithubRepository):
    """PostgreSQL implementation of UserGithubRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_id(self, user_id: UserId) -> Optional[UserGithub]:
        """Find the GitHub link owned by a user.

        Args:
            user_id: User ID

        Returns:
            UserGithub if found, None otherwise
        """
        stmt = select(user_github_table).where(user_github_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user_github(dict(row)) if row else None

    async def find_by_github_id(self, github_id: int) -> Optional[UserGithub]:
        """Find the link for a GitHub account.

        Args:
            github_id: Numeric GitHub account id

        Returns:
            UserGithub if found, None otherwise
        """
        stmt = select(user_github_table).where(
            user_github_table.c.github_id == github_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user_github(dict(row)) if row else None

    async def exists_by_github_id(self, github_id: int) -> bool:
        """Check if any user has linked the given GitHub account."""
        stmt = select(user_github_table.c.id).where(
            user_github_table.c.github_id == github_id
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, link: UserGithub) -> UserGithub:
        """Save a GitHub link (create or update).

        Args:
            link: UserGithub to save

        Returns:
            Saved UserGithub
        """
        if link.created_at is None:
            now = datetime.now(timezone.utc)
            link = link.model_copy(update={"created_at": now, "modified_at": now})

        link_dict = user_github_to_dict(link)

        stmt = select(user_github_table.c.id).where(user_github_table.c.id == link.id)
        existing = (await self.session.execute(stmt)).first()

        if existing:
            stmt = (
                user_github_table.update()
                .where(user_github_table.c.id == link.id)
                .values(**link_dict)
            )
        else:
            stmt = user_github_table.insert().values(**link_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return link
