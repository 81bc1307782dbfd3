"""Mock persistence providers for testing."""

from dishka import Scope, provide

from knot.domain.repository import UserGithubRepository, UserRepository
from knot.persistence.repository.inmemory import (
    InMemoryUserGithubRepository,
    InMemoryUserRepository,
)
from knot.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so state survives across requests of one container (an
    e2e client can register a user and then fetch it). Each test builds its
    own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_user_github_repository(self) -> UserGithubRepository:
        """Provide in-memory user GitHub repository."""
        return InMemoryUserGithubRepository()
