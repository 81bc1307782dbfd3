"""User GitHub link entity.

Records the GitHub account linked to a user. The mapping is 1:1 in both
directions: a user has at most one link and a GitHub id belongs to at most
one user.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from knot.domain.model.common import DomainModel
from knot.domain.value import UserGithubId, UserId


class UserGithub(DomainModel):
    """GitHub account linked to a user.

    Relinking overwrites the GitHub fields of the existing row; the row's
    own id never changes.
    """

    id: UserGithubId
    user_id: UserId
    github_id: int
    github_username: str
    github_access_token: str = Field(repr=False)
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
