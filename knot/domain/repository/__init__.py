"""Repository interfaces for the user service domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from knot.domain.repository.user import UserRepository
from knot.domain.repository.user_github import UserGithubRepository

__all__ = [
    "UserRepository",
    "UserGithubRepository",
]
