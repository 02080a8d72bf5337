"""Domain value types.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from overflow.domain.value.common import RootValueObject


class VoteType(str, Enum):
    """Direction of a vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VoteTarget(str, Enum):
    """Kind of entity that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class TagName(RootValueObject[str]):
    """Topic label attached to questions.

    Any non-blank name up to 20 characters. Matching is exact, so
    ``javascript`` and ``JavaScript`` are different tags.
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name length."""
        v = v.strip()
        if len(v) < 1 or len(v) > 20:
            raise ValueError("Tag name must be 1-20 characters")
        return v
