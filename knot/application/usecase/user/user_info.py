"""Public user projection shared by user use cases."""

from datetime import datetime

from pydantic import BaseModel

from knot.domain.model import User


class UserInfoResponse(BaseModel):
    """Public view of a user. Never carries the password hash."""

    user_id: str
    email: str
    name: str
    profile_image_url: str | None = None
    description: str | None = None
    github_link: str | None = None
    position: str | None = None
    detailed_position: str | None = None
    career_level: str | None = None
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserInfoResponse":
        """Project a persisted user.

        Args:
            user: Domain user (must have been saved)

        Returns:
            Public user information
        """
        return cls(
            user_id=str(user.id),
            email=user.email,
            name=user.name,
            profile_image_url=user.profile_image_url,
            description=user.description,
            github_link=user.github_link,
            position=user.position.label if user.position else None,
            detailed_position=user.detailed_position,
            career_level=user.career_level.label if user.career_level else None,
            created_at=user.created_at,
        )
