"""Domain model entities for the user service."""

from knot.domain.model.user import User
from knot.domain.model.user_github import UserGithub

__all__ = [
    "User",
    "UserGithub",
]
