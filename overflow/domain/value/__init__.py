"""Domain value objects."""

from overflow.domain.value.identifiers import AnswerId, QuestionId, TagId, UserId
from overflow.domain.value.types import TagName, VoteTarget, VoteType

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "TagId",
    # Types
    "TagName",
    "VoteType",
    "VoteTarget",
]
