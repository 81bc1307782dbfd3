"""In-memory repository implementations for testing."""

from .user import InMemoryUserRepository
from .user_github import InMemoryUserGithubRepository

__all__ = [
    "InMemoryUserRepository",
    "InMemoryUserGithubRepository",
]
