"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .database import InMemoryDatabase
from .question import InMemoryQuestionRepository
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryDatabase",
    "InMemoryQuestionRepository",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]
