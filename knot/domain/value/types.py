"""Domain value objects for the user service.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator

from knot.domain.value.common import ValueObject
from knot.domain.value.identifiers import SkillId


class LabeledEnum(str, Enum):
    """Enum whose members also carry a human-readable display label."""

    label: str

    def __new__(cls, value: str, label: str) -> "LabeledEnum":
        member = str.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member

    @classmethod
    def from_label(cls, label: str):
        """Look up a member by display label or by member name.

        The input is stripped, then compared against the display labels
        and, upper-cased, against the member names.

        Args:
            label: Label submitted by the client

        Returns:
            The matching member, or None if the label is unknown
        """
        candidate = label.strip()
        normalized = candidate.upper()
        for member in cls:
            if member.label == candidate or member.name == normalized:
                return member
        return None


class Position(LabeledEnum):
    """Role a user plays on a team."""

    DEVELOPER = ("developer", "개발자")
    DESIGNER = ("designer", "디자이너")
    PLANNER = ("planner", "기획자")
    OTHER = ("other", "기타")


class CareerLevel(LabeledEnum):
    """Self-reported seniority."""

    BEGINNER = ("beginner", "초보자")
    INTERMEDIATE = ("intermediate", "중급")
    ADVANCED = ("advanced", "고급")
    EXPERT = ("expert", "전문가")


class PageRequest(ValueObject):
    """Limit/offset window over an ordered result set."""

    limit: int = Field(default=20, ge=1)
    offset: int = Field(default=0, ge=0)


class UserSearchFilter(ValueObject):
    """Structured user search criteria.

    Each predicate is disabled when its input is empty:
    - keyword: None matches every user, otherwise name OR email must
      contain it (case-sensitive substring)
    - required_skill_ids: empty matches every user, otherwise the user
      must be tagged with every id in the set
    """

    keyword: Optional[str] = None
    required_skill_ids: frozenset[SkillId] = frozenset()

    @field_validator("keyword")
    @classmethod
    def blank_keyword_disables_filter(cls, v: Optional[str]) -> Optional[str]:
        """Collapse blank keywords to None."""
        if v is None or not v.strip():
            return None
        return v

    @classmethod
    def build(
        cls, keyword: Optional[str], skill_ids: Optional[list[SkillId]]
    ) -> "UserSearchFilter":
        """Build a filter from raw, possibly absent, inputs."""
        return cls(keyword=keyword, required_skill_ids=frozenset(skill_ids or ()))

    @property
    def keyword_enabled(self) -> bool:
        return self.keyword is not None

    @property
    def skills_enabled(self) -> bool:
        return len(self.required_skill_ids) > 0
