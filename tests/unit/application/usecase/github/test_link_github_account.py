"""Unit tests for LinkGithubAccountUseCase."""

import pytest

from knot.application.usecase.github import (
    LinkGithubAccountRequest,
    LinkGithubAccountUseCase,
)
from knot.domain.error import AccountMismatchError, DuplicateExternalAccountError
from knot.util.uuid7 import uuid7
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def link_request(acting, user_id=None, github_id=42, username="octocat"):
    return LinkGithubAccountRequest(
        acting_user_id=acting,
        user_id=user_id or acting,
        github_id=github_id,
        github_username=username,
        github_access_token="gho_secret",
    )


class TestLinkGithubAccountUseCase:
    """Tests for LinkGithubAccountUseCase."""

    @pytest.mark.asyncio
    async def test_link_and_relink(self, unit_env):
        # Arrange
        use_case = await unit_env.get(LinkGithubAccountUseCase)
        user_id = uuid7()

        # Act
        first = await use_case.execute(link_request(user_id))
        second = await use_case.execute(
            link_request(user_id, github_id=43, username="octodog")
        )

        # Assert
        assert first.user_id == str(user_id)
        assert first.github_id == 42
        assert second.github_id == 43
        assert second.github_username == "octodog"
        assert second.created_at == first.created_at
        assert "github_access_token" not in second.model_dump()

    @pytest.mark.asyncio
    async def test_mismatch(self, unit_env):
        use_case = await unit_env.get(LinkGithubAccountUseCase)

        with pytest.raises(AccountMismatchError):
            await use_case.execute(link_request(uuid7(), user_id=uuid7()))

    @pytest.mark.asyncio
    async def test_taken_by_another_user(self, unit_env):
        use_case = await unit_env.get(LinkGithubAccountUseCase)
        await use_case.execute(link_request(uuid7()))

        with pytest.raises(DuplicateExternalAccountError):
            await use_case.execute(link_request(uuid7()))
