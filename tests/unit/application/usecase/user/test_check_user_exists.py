"""Unit tests for CheckUserExistsUseCase."""

import pytest
from pydantic import ValidationError

from knot.application.usecase.user import (
    CheckUserExistsRequest,
    CheckUserExistsUseCase,
)
from knot.domain.repository import UserRepository
from knot.util.uuid7 import uuid7
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCheckUserExistsUseCase:
    @pytest.mark.asyncio
    async def test_by_user_id(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())
        use_case = await unit_env.get(CheckUserExistsUseCase)

        found = await use_case.execute(CheckUserExistsRequest(user_id=user.id))
        missing = await use_case.execute(CheckUserExistsRequest(user_id=uuid7()))

        assert found.exists is True
        assert missing.exists is False

    @pytest.mark.asyncio
    async def test_by_email(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user(email="alice@example.com"))
        use_case = await unit_env.get(CheckUserExistsUseCase)

        found = await use_case.execute(
            CheckUserExistsRequest(email="alice@example.com")
        )
        missing = await use_case.execute(
            CheckUserExistsRequest(email="nobody@example.com")
        )

        assert found.exists is True
        assert missing.exists is False

    @pytest.mark.parametrize(
        "values", [{}, {"user_id": uuid7(), "email": "alice@example.com"}]
    )
    def test_exactly_one_key_required(self, values):
        with pytest.raises(ValidationError):
            CheckUserExistsRequest(**values)
