"""Domain value objects for the user service."""

from knot.domain.value.identifiers import SkillId, UserGithubId, UserId
from knot.domain.value.types import (
    CareerLevel,
    PageRequest,
    Position,
    UserSearchFilter,
)

__all__ = [
    # Identifiers
    "UserId",
    "UserGithubId",
    "SkillId",
    # Types
    "Position",
    "CareerLevel",
    "PageRequest",
    "UserSearchFilter",
]
