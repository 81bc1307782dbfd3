"""Domain services."""

from .base import Service
from .credential_service import CredentialService
from .password import PasswordEncoder
from .user_github_service import GithubLinkRequest, UserGithubService
from .user_search_service import UserSearchResult, UserSearchService
from .user_service import UserService, UserUpdate

__all__ = [
    "CredentialService",
    "GithubLinkRequest",
    "PasswordEncoder",
    "Service",
    "UserGithubService",
    "UserSearchResult",
    "UserSearchService",
    "UserService",
    "UserUpdate",
]
