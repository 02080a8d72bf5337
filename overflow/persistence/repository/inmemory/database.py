"""Shared in-memory storage backing the in-memory repositories."""

from overflow.domain.model import Answer, Question, Tag, User
from overflow.domain.value import AnswerId, QuestionId, TagId, UserId


class InMemoryDatabase:
    """Plain dicts standing in for the database tables.

    Repositories are created per request but share one of these, so data
    written in one request is visible to the next. Insertion order of the
    dicts is the storage order.
    """

    def __init__(self) -> None:
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.tags: dict[TagId, Tag] = {}
        self.users: dict[UserId, User] = {}
