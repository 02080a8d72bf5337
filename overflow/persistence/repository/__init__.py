"""PostgreSQL repository implementations."""

from overflow.persistence.repository.answer import PostgresAnswerRepository
from overflow.persistence.repository.question import PostgresQuestionRepository
from overflow.persistence.repository.tag import PostgresTagRepository
from overflow.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresAnswerRepository",
    "PostgresQuestionRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
]
