"""Unit tests for in-memory repositories."""

import pytest

from knot.domain.model import UserGithub
from knot.domain.value import PageRequest, UserGithubId, UserId, UserSearchFilter
from knot.util.uuid7 import uuid7
from tests.conftest import make_user


class TestInMemoryUserRepository:
    """Store-side behavior the domain relies on."""

    @pytest.mark.asyncio
    async def test_save_stamps_new_user(self, user_repository):
        user = make_user()
        assert user.is_new

        saved = await user_repository.save(user)

        assert not saved.is_new
        assert saved.created_at == saved.modified_at

    @pytest.mark.asyncio
    async def test_save_existing_keeps_created_at(self, user_repository):
        saved = await user_repository.save(make_user(name="Alice"))

        resaved = await user_repository.save(saved.model_copy(update={"name": "Al"}))

        assert resaved.created_at == saved.created_at
        assert (await user_repository.find_by_id(saved.id)).name == "Al"

    @pytest.mark.asyncio
    async def test_lookups(self, user_repository):
        saved = await user_repository.save(make_user(email="alice@example.com"))

        assert await user_repository.find_by_email("alice@example.com") == saved
        assert await user_repository.find_by_email("ALICE@example.com") is None
        assert await user_repository.exists_by_id(saved.id)
        assert not await user_repository.exists_by_id(UserId(uuid7()))

    @pytest.mark.asyncio
    async def test_filter_orders_by_codepoint(self, user_repository):
        """Uppercase sorts before lowercase, then ties break on email."""
        for name, email in [
            ("bob", "b@example.com"),
            ("Bob", "z@example.com"),
            ("Bob", "a@example.com"),
        ]:
            await user_repository.save(make_user(name=name, email=email))

        found = await user_repository.find_all_by_filter(
            UserSearchFilter(), PageRequest()
        )

        assert [(u.name, u.email) for u in found] == [
            ("Bob", "a@example.com"),
            ("Bob", "z@example.com"),
            ("bob", "b@example.com"),
        ]


class TestInMemoryUserGithubRepository:
    @pytest.mark.asyncio
    async def test_save_and_find(self, user_github_repository):
        user_id = UserId(uuid7())
        link = UserGithub(
            id=UserGithubId(uuid7()),
            user_id=user_id,
            github_id=99,
            github_username="octo",
            github_access_token="gho_x",
        )

        saved = await user_github_repository.save(link)

        assert saved.created_at is not None
        assert await user_github_repository.find_by_user_id(user_id) == saved
        assert await user_github_repository.find_by_github_id(99) == saved
        assert await user_github_repository.exists_by_github_id(99)
        assert not await user_github_repository.exists_by_github_id(100)

    @pytest.mark.asyncio
    async def test_token_hidden_from_repr(self, user_github_repository):
        link = UserGithub(
            id=UserGithubId(uuid7()),
            user_id=UserId(uuid7()),
            github_id=1,
            github_username="octo",
            github_access_token="gho_very_secret",
        )

        assert "gho_very_secret" not in repr(link)
