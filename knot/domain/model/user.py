"""User aggregate root.

Users register with email and password, and can later link a GitHub
account and describe their role on a team.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from knot.domain.model.common import DomainModel
from knot.domain.value import CareerLevel, Position, UserId


class User(DomainModel):
    """User aggregate root.

    `password` always holds a one-way hash. `created_at` is assigned by the
    store on first save, so a user without it has never been persisted.
    `deleted_at` is a deletion marker; lookups and search do not consult it.
    """

    id: UserId
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(repr=False)
    name: str = Field(min_length=1)
    profile_image_url: Optional[str] = None
    description: Optional[str] = None
    github_link: Optional[str] = None
    position: Optional[Position] = None
    detailed_position: Optional[str] = None
    career_level: Optional[CareerLevel] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def is_new(self) -> bool:
        """Whether this user has never been saved."""
        return self.created_at is None
