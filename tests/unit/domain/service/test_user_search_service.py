"""Unit tests for UserSearchService."""

import pytest

from knot.domain.service import UserSearchService
from knot.domain.value import PageRequest, SkillId
from knot.util.uuid7 import uuid7
from tests.conftest import make_user

PYTHON = SkillId(uuid7())
GO = SkillId(uuid7())
FIGMA = SkillId(uuid7())


@pytest.fixture
def service(user_repository) -> UserSearchService:
    return UserSearchService(user_repository)


class TestSearchUsers:
    """Tests for UserSearchService.search_users()."""

    @pytest.mark.asyncio
    async def test_no_filters_returns_everyone_in_order(self, service, user_repository):
        """Without filters every user matches, ordered by name then email."""
        await user_repository.save(make_user("Charlie"))
        await user_repository.save(make_user("Alice", email="z@example.com"))
        await user_repository.save(make_user("Alice", email="a@example.com"))
        await user_repository.save(make_user("Bob"))

        result = await service.search_users(None, None, PageRequest())

        assert [(u.name, u.email) for u in result.users] == [
            ("Alice", "a@example.com"),
            ("Alice", "z@example.com"),
            ("Bob", "bob@example.com"),
            ("Charlie", "charlie@example.com"),
        ]
        assert result.total == 4

    @pytest.mark.asyncio
    async def test_keyword_matches_name_or_email(self, service, user_repository):
        """Keyword is a substring match on name OR email."""
        by_name = await user_repository.save(make_user("Kimberly", email="kb@ex.com"))
        by_email = await user_repository.save(make_user("Lee", email="kim.lee@ex.com"))
        await user_repository.save(make_user("Park", email="park@ex.com"))

        result = await service.search_users("Kim", None, PageRequest())

        assert {u.id for u in result.users} == {by_name.id}
        assert result.total == 1

        result = await service.search_users("kim", None, PageRequest())

        assert {u.id for u in result.users} == {by_email.id}

    @pytest.mark.asyncio
    async def test_keyword_wildcards_are_literal(self, service, user_repository):
        """Percent and underscore are not wildcards."""
        await user_repository.save(make_user("Alice"))
        literal = await user_repository.save(make_user("100%_done", email="d@ex.com"))

        result = await service.search_users("%_", None, PageRequest())

        assert [u.id for u in result.users] == [literal.id]

    @pytest.mark.asyncio
    async def test_blank_keyword_disables_filter(self, service, user_repository):
        await user_repository.save(make_user("Alice"))
        await user_repository.save(make_user("Bob"))

        result = await service.search_users("   ", None, PageRequest())

        assert result.total == 2

    @pytest.mark.asyncio
    async def test_skills_require_all(self, service, user_repository):
        """Only users tagged with every requested skill match."""
        # Arrange
        both = await user_repository.save(make_user("Alice"))
        python_only = await user_repository.save(make_user("Bob"))
        user_repository.tag_skill(both.id, PYTHON)
        user_repository.tag_skill(both.id, GO)
        user_repository.tag_skill(python_only.id, PYTHON)

        # Act
        result = await service.search_users(None, [PYTHON, GO], PageRequest())

        # Assert
        assert [u.id for u in result.users] == [both.id]
        assert result.total == 1

    @pytest.mark.asyncio
    async def test_duplicate_skill_tags_not_over_counted(
        self, service, user_repository
    ):
        """A user tagged twice with one skill does not satisfy two skills."""
        user = await user_repository.save(make_user("Alice"))
        user_repository.tag_skill(user.id, PYTHON)
        user_repository.tag_skill(user.id, PYTHON)

        result = await service.search_users(None, [PYTHON, GO], PageRequest())

        assert result.users == []
        assert result.total == 0

    @pytest.mark.asyncio
    async def test_empty_skill_list_disables_filter(self, service, user_repository):
        await user_repository.save(make_user("Alice"))

        result = await service.search_users(None, [], PageRequest())

        assert result.total == 1

    @pytest.mark.asyncio
    async def test_keyword_and_skills_combine(self, service, user_repository):
        """Keyword and skill predicates are ANDed."""
        alice = await user_repository.save(make_user("Alice"))
        alina = await user_repository.save(make_user("Alina"))
        await user_repository.save(make_user("Bob"))
        user_repository.tag_skill(alice.id, FIGMA)
        user_repository.tag_skill(alina.id, GO)

        result = await service.search_users("Ali", [FIGMA], PageRequest())

        assert [u.id for u in result.users] == [alice.id]
        assert result.total == 1

    @pytest.mark.asyncio
    async def test_pagination_window_and_total(self, service, user_repository):
        """Page slices the ordered matches; total counts all of them."""
        for name in ["Eve", "Dan", "Cat", "Bea", "Amy"]:
            await user_repository.save(make_user(name))

        result = await service.search_users(
            None, None, PageRequest(limit=2, offset=2)
        )

        assert [u.name for u in result.users] == ["Cat", "Dan"]
        assert result.total == 5

    @pytest.mark.asyncio
    async def test_offset_past_end(self, service, user_repository):
        await user_repository.save(make_user("Amy"))

        result = await service.search_users(
            None, None, PageRequest(limit=10, offset=5)
        )

        assert result.users == []
        assert result.total == 1

    @pytest.mark.asyncio
    async def test_pages_are_stable(self, service, user_repository):
        """Consecutive pages neither overlap nor skip users."""
        for i in range(7):
            await user_repository.save(make_user("Same", email=f"u{i}@example.com"))

        seen = []
        for offset in range(0, 7, 3):
            page = await service.search_users(
                None, None, PageRequest(limit=3, offset=offset)
            )
            seen.extend(u.email for u in page.users)

        assert seen == sorted(seen)
        assert len(set(seen)) == 7
