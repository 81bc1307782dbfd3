"""PostgreSQL repository implementations."""

from knot.persistence.repository.user import PostgresUserRepository
from knot.persistence.repository.user_github import PostgresUserGithubRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresUserGithubRepository",
]
