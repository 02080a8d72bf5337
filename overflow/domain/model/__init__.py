"""Domain model entities for Fake Stack Overflow."""

from overflow.domain.model.answer import Answer
from overflow.domain.model.question import Question
from overflow.domain.model.tag import Tag
from overflow.domain.model.user import User, VoteEntry

__all__ = [
    "Answer",
    "Question",
    "Tag",
    "User",
    "VoteEntry",
]
