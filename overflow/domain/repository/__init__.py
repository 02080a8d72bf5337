"""Repository interfaces for the Fake Stack Overflow domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from overflow.domain.repository.answer import AnswerRepository
from overflow.domain.repository.question import QuestionOrder, QuestionRepository
from overflow.domain.repository.rate_limit import RateLimitStore
from overflow.domain.repository.tag import TagRepository
from overflow.domain.repository.user import UserRepository

__all__ = [
    "AnswerRepository",
    "QuestionOrder",
    "QuestionRepository",
    "RateLimitStore",
    "TagRepository",
    "UserRepository",
]
