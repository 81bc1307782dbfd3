"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from knot.domain.model import User, UserGithub
from knot.domain.value import CareerLevel, Position, UserGithubId, UserId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        email=row["email"],
        password=row["password"],
        name=row["name"],
        profile_image_url=row.get("profile_image_url"),
        description=row.get("description"),
        github_link=row.get("github_link"),
        position=Position(row["position"]) if row.get("position") else None,
        detailed_position=row.get("detailed_position"),
        career_level=CareerLevel(row["career_level"])
        if row.get("career_level")
        else None,
        created_at=row["created_at"],
        modified_at=row["modified_at"],
        deleted_at=row.get("deleted_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["position"] = user.position.value if user.position else None
    data["career_level"] = user.career_level.value if user.career_level else None
    return data


def row_to_user_github(row: Dict[str, Any]) -> UserGithub:
    """Convert database row to UserGithub domain model.

    Args:
        row: Database row as dict

    Returns:
        UserGithub domain model
    """
    return UserGithub(
        id=UserGithubId(_as_uuid(row["id"])),
        user_id=UserId(_as_uuid(row["user_id"])),
        github_id=row["github_id"],
        github_username=row["github_username"],
        github_access_token=row["github_access_token"],
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        modified_at=row["modified_at"],
    )


def user_github_to_dict(link: UserGithub) -> Dict[str, Any]:
    """Convert UserGithub domain model to database dict.

    Args:
        link: UserGithub domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return link.model_dump()
