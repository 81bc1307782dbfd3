"""Unit tests for VerifyCredentialsUseCase."""

import pytest

from knot.application.usecase.auth import (
    VerifyCredentialsRequest,
    VerifyCredentialsUseCase,
)
from knot.application.usecase.user import CreateUserRequest, CreateUserUseCase
from knot.domain.error import UserNotFoundError, WrongPasswordError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestVerifyCredentialsUseCase:
    """Tests for VerifyCredentialsUseCase."""

    @pytest.mark.asyncio
    async def test_registered_credentials_verify(self, unit_env):
        """Credentials used at registration verify to the same user."""
        # Arrange
        create_user = await unit_env.get(CreateUserUseCase)
        created = await create_user.execute(
            CreateUserRequest(email="alice@example.com", password="hunter22", name="A")
        )
        use_case = await unit_env.get(VerifyCredentialsUseCase)

        # Act
        response = await use_case.execute(
            VerifyCredentialsRequest(email="alice@example.com", password="hunter22")
        )

        # Assert
        assert response.user_id == created.user_id

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        create_user = await unit_env.get(CreateUserUseCase)
        await create_user.execute(
            CreateUserRequest(email="alice@example.com", password="hunter22", name="A")
        )
        use_case = await unit_env.get(VerifyCredentialsUseCase)

        with pytest.raises(WrongPasswordError):
            await use_case.execute(
                VerifyCredentialsRequest(email="alice@example.com", password="nope")
            )

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env):
        use_case = await unit_env.get(VerifyCredentialsUseCase)

        with pytest.raises(UserNotFoundError):
            await use_case.execute(
                VerifyCredentialsRequest(email="ghost@example.com", password="pw")
            )
