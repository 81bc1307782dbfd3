"""Unit tests for domain value types."""

import pytest
from pydantic import ValidationError

from knot.domain.value import (
    CareerLevel,
    PageRequest,
    Position,
    SkillId,
    UserSearchFilter,
)
from knot.util.uuid7 import uuid7


class TestLabeledEnums:
    """Tests for Position and CareerLevel label lookup."""

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("개발자", Position.DEVELOPER),
            ("디자이너", Position.DESIGNER),
            ("기획자", Position.PLANNER),
            ("기타", Position.OTHER),
            ("DEVELOPER", Position.DEVELOPER),
            ("designer", Position.DESIGNER),
            ("  Planner ", Position.PLANNER),
            (" 기타 ", Position.OTHER),
        ],
    )
    def test_position_from_label(self, label, expected):
        assert Position.from_label(label) is expected

    @pytest.mark.parametrize(
        "label, expected",
        [
            ("초보자", CareerLevel.BEGINNER),
            ("중급", CareerLevel.INTERMEDIATE),
            ("고급", CareerLevel.ADVANCED),
            ("전문가", CareerLevel.EXPERT),
            ("expert", CareerLevel.EXPERT),
        ],
    )
    def test_career_level_from_label(self, label, expected):
        assert CareerLevel.from_label(label) is expected

    @pytest.mark.parametrize("label", ["", "   ", "astronaut", "중급", "개발"])
    def test_unknown_position_label(self, label):
        """Labels of another enum or partial labels do not match."""
        assert Position.from_label(label) is None

    def test_members_carry_value_and_label(self):
        assert Position.DEVELOPER.value == "developer"
        assert Position.DEVELOPER.label == "개발자"
        assert Position("developer") is Position.DEVELOPER
        assert CareerLevel.INTERMEDIATE.label == "중급"


class TestUserSearchFilter:
    """Tests for UserSearchFilter construction."""

    def test_empty_inputs_disable_both_predicates(self):
        search_filter = UserSearchFilter.build(None, None)

        assert not search_filter.keyword_enabled
        assert not search_filter.skills_enabled

    @pytest.mark.parametrize("keyword", ["", " ", "\t\n"])
    def test_blank_keyword_is_disabled(self, keyword):
        assert UserSearchFilter.build(keyword, []).keyword is None

    def test_keyword_kept_verbatim(self):
        """Non-blank keywords are not trimmed or case-folded."""
        assert UserSearchFilter.build(" Kim", None).keyword == " Kim"

    def test_skill_ids_deduplicated(self):
        skill = SkillId(uuid7())

        search_filter = UserSearchFilter.build(None, [skill, skill])

        assert search_filter.skills_enabled
        assert search_filter.required_skill_ids == frozenset({skill})

    def test_filter_is_immutable(self):
        search_filter = UserSearchFilter.build("kim", None)

        with pytest.raises(ValidationError):
            search_filter.keyword = "lee"


class TestPageRequest:
    def test_defaults(self):
        page = PageRequest()

        assert page.limit == 20
        assert page.offset == 0

    @pytest.mark.parametrize("limit, offset", [(0, 0), (-1, 0), (10, -1)])
    def test_rejects_invalid_window(self, limit, offset):
        with pytest.raises(ValidationError):
            PageRequest(limit=limit, offset=offset)
