"""Application layer DI providers."""

from dishka import Scope, provide

from knot.application.usecase.auth import VerifyCredentialsUseCase
from knot.application.usecase.github import LinkGithubAccountUseCase
from knot.application.usecase.user import (
    CheckUserExistsUseCase,
    CreateUserUseCase,
    GetUserUseCase,
    SearchUsersUseCase,
    UpdateUserUseCase,
)
from knot.config import SearchSettings
from knot.domain.service import (
    CredentialService,
    UserGithubService,
    UserSearchService,
    UserService,
)
from knot.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_verify_credentials_use_case(
        self, credential_service: CredentialService
    ) -> VerifyCredentialsUseCase:
        """Provide verify credentials use case."""
        return VerifyCredentialsUseCase(credential_service=credential_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(self, user_service: UserService) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_check_user_exists_use_case(
        self, user_service: UserService
    ) -> CheckUserExistsUseCase:
        """Provide check user exists use case."""
        return CheckUserExistsUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_search_users_use_case(
        self, user_search_service: UserSearchService, settings: SearchSettings
    ) -> SearchUsersUseCase:
        """Provide search users use case."""
        return SearchUsersUseCase(
            user_search_service=user_search_service, settings=settings
        )

    # GitHub use cases
    @provide(scope=Scope.REQUEST)
    def get_link_github_account_use_case(
        self, user_github_service: UserGithubService
    ) -> LinkGithubAccountUseCase:
        """Provide link GitHub account use case."""
        return LinkGithubAccountUseCase(user_github_service=user_github_service)
