"""Domain layer DI providers."""

from dishka import Scope, provide

from knot.domain.repository import UserGithubRepository, UserRepository
from knot.domain.service import (
    CredentialService,
    PasswordEncoder,
    UserGithubService,
    UserSearchService,
    UserService,
)
from knot.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_credential_service(
        self, user_repository: UserRepository, password_encoder: PasswordEncoder
    ) -> CredentialService:
        """Provide credential verification domain service."""
        return CredentialService(
            user_repository=user_repository, password_encoder=password_encoder
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_encoder: PasswordEncoder
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_encoder=password_encoder
        )

    @provide
    def get_user_github_service(
        self, user_github_repository: UserGithubRepository
    ) -> UserGithubService:
        """Provide GitHub account link domain service."""
        return UserGithubService(user_github_repository=user_github_repository)

    @provide
    def get_user_search_service(
        self, user_repository: UserRepository
    ) -> UserSearchService:
        """Provide user search domain service."""
        return UserSearchService(user_repository=user_repository)
