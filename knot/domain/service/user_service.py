"""User domain service."""

from dataclasses import dataclass, fields
from datetime import datetime, timezone
from typing import Optional

import logfire

from knot.domain.error import (
    DuplicateEmailError,
    UserNotFoundError,
    ValidationFailedError,
)
from knot.domain.model import User
from knot.domain.repository import UserRepository
from knot.domain.value import CareerLevel, Position, UserId
from knot.util.uuid7 import uuid7

from .base import Service
from .password import PasswordEncoder


@dataclass(frozen=True)
class UserUpdate:
    """Partial update of a user's profile.

    Every field is optional; None means "leave unchanged". Position and
    career level are raw labels, resolved during the merge.
    """

    name: Optional[str] = None
    position: Optional[str] = None
    detailed_position: Optional[str] = None
    career_level: Optional[str] = None
    profile_image_url: Optional[str] = None
    description: Optional[str] = None
    github_link: Optional[str] = None


class UserService(Service):
    """Domain service for user account operations."""

    def __init__(
        self, user_repository: UserRepository, password_encoder: PasswordEncoder
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_encoder: One-way password hash/verify capability
        """
        self.user_repository = user_repository
        self.password_encoder = password_encoder

    async def create_user(
        self,
        email: str,
        password: str,
        name: str,
        profile_image_url: Optional[str] = None,
        description: Optional[str] = None,
        github_link: Optional[str] = None,
    ) -> User:
        """Register a new user.

        Args:
            email: Account email (must be unused)
            password: Plaintext password, stored only as a hash
            name: Display name
            profile_image_url: Optional profile image URL
            description: Optional free-text description
            github_link: Optional GitHub profile URL

        Returns:
            The persisted user

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        with logfire.span("user_service.create_user"):
            if await self.user_repository.exists_by_email(email):
                logfire.warn("Registration with duplicate email")
                raise DuplicateEmailError(email)

            user = User(
                id=UserId(uuid7()),
                email=email,
                password=self.password_encoder.encode(password),
                name=name,
                profile_image_url=profile_image_url,
                description=description,
                github_link=github_link,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id))
            return saved

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            UserNotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise UserNotFoundError(str(user_id))
            return user

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        with logfire.span("user_service.exists", user_id=str(user_id)):
            return await self.user_repository.exists_by_id(user_id)

    async def email_exists(self, email: str) -> bool:
        """Check whether an email is already registered."""
        with logfire.span("user_service.email_exists"):
            return await self.user_repository.exists_by_email(email)

    async def update_user(self, user_id: UserId, update: UserUpdate) -> User:
        """Merge a partial update into a user's profile.

        Labels are resolved before anything is written, so an invalid label
        leaves the stored user untouched. Email and password are never
        changed here. modified_at is refreshed even when the update is empty.

        Concurrent updates of the same user are last-write-wins.

        Args:
            user_id: User to update
            update: Fields to overwrite (None fields are kept)

        Returns:
            The persisted, updated user

        Raises:
            UserNotFoundError: If user not found
            ValidationFailedError: If position or career level is unknown
        """
        with logfire.span("user_service.update_user", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            changes: dict[str, object] = {
                field.name: getattr(update, field.name)
                for field in fields(update)
                if getattr(update, field.name) is not None
            }
            if update.position is not None:
                changes["position"] = _resolve_label(
                    Position, "position", update.position
                )
            if update.career_level is not None:
                changes["career_level"] = _resolve_label(
                    CareerLevel, "career_level", update.career_level
                )
            changes["modified_at"] = datetime.now(timezone.utc)

            saved = await self.user_repository.save(user.model_copy(update=changes))
            logfire.info(
                "User updated",
                user_id=str(user_id),
                fields=sorted(k for k in changes if k != "modified_at"),
            )
            return saved


def _resolve_label(enum_cls, field: str, label: str):
    member = enum_cls.from_label(label)
    if member is None:
        logfire.warn("Unknown label", field=field, label=label)
        raise ValidationFailedError(field, label)
    return member
