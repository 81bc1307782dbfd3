"""Strongly typed identifiers for the user service domain.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
UserGithubId = NewType("UserGithubId", UUID)

# Tech-stack tags are owned by another service; only their ids reach us
SkillId = NewType("SkillId", UUID)
