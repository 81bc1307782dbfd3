"""Test configuration and fixtures."""

import pytest

from knot.adapter.password import MockPasswordEncoder
from knot.domain.model import User
from knot.domain.value import UserId
from knot.persistence.repository.inmemory import (
    InMemoryUserGithubRepository,
    InMemoryUserRepository,
)
from knot.util.uuid7 import uuid7


def make_user(
    name: str = "Alice",
    email: str | None = None,
    password: str = "secret-password",
    **fields,
) -> User:
    """Helper to build an unsaved user with a mock-encoded password."""
    return User(
        id=UserId(uuid7()),
        email=email or f"{name.lower()}@example.com",
        password=MockPasswordEncoder().encode(password),
        name=name,
        **fields,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def user_github_repository() -> InMemoryUserGithubRepository:
    return InMemoryUserGithubRepository()


@pytest.fixture
def password_encoder() -> MockPasswordEncoder:
    return MockPasswordEncoder()
