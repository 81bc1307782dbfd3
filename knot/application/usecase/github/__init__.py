"""GitHub link use cases."""

from .link_github_account import (
    LinkGithubAccountRequest,
    LinkGithubAccountResponse,
    LinkGithubAccountUseCase,
)

__all__ = [
    "LinkGithubAccountRequest",
    "LinkGithubAccountResponse",
    "LinkGithubAccountUseCase",
]
