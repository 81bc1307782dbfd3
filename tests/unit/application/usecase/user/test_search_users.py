"""Unit tests for SearchUsersUseCase."""

import pytest

from knot.application.usecase.user import SearchUsersRequest, SearchUsersUseCase
from knot.config import SearchSettings
from knot.domain.service import UserSearchService
from knot.domain.value import SkillId
from knot.util.uuid7 import uuid7
from tests.conftest import make_user


@pytest.fixture
def use_case(user_repository) -> SearchUsersUseCase:
    return SearchUsersUseCase(
        UserSearchService(user_repository),
        SearchSettings(default_limit=2, max_limit=3),
    )


class TestSearchUsersUseCase:
    """Tests for SearchUsersUseCase."""

    @pytest.mark.asyncio
    async def test_default_limit_from_settings(self, use_case, user_repository):
        for name in ["Amy", "Bea", "Cat"]:
            await user_repository.save(make_user(name))

        response = await use_case.execute(SearchUsersRequest())

        assert [u.name for u in response.users] == ["Amy", "Bea"]
        assert response.total == 3
        assert response.limit == 2
        assert response.offset == 0

    @pytest.mark.asyncio
    async def test_limit_capped_at_max(self, use_case, user_repository):
        for name in ["Amy", "Bea", "Cat", "Dan"]:
            await user_repository.save(make_user(name))

        response = await use_case.execute(SearchUsersRequest(limit=50, offset=1))

        assert [u.name for u in response.users] == ["Bea", "Cat", "Dan"]
        assert response.limit == 3
        assert response.total == 4

    @pytest.mark.asyncio
    async def test_filters_passed_through(self, use_case, user_repository):
        skill = SkillId(uuid7())
        kim = await user_repository.save(make_user("Kim"))
        await user_repository.save(make_user("Kimchi"))
        user_repository.tag_skill(kim.id, skill)

        response = await use_case.execute(
            SearchUsersRequest(query="Kim", skills=[skill])
        )

        assert [u.user_id for u in response.users] == [str(kim.id)]
        assert response.total == 1

    @pytest.mark.asyncio
    async def test_results_never_expose_password(self, use_case, user_repository):
        await user_repository.save(make_user("Amy"))

        response = await use_case.execute(SearchUsersRequest())

        assert "password" not in response.users[0].model_dump()
