"""In-memory answer repository for testing."""

from typing import Optional

from overflow.domain.model import Answer
from overflow.domain.repository.answer import AnswerRepository
from overflow.domain.value import AnswerId, VoteType

from .database import InMemoryDatabase


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._db.answers.get(answer_id)

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._db.answers[answer.id] = answer
        return answer

    async def increment_vote_count(
        self, answer_id: AnswerId, vote_type: VoteType
    ) -> None:
        """Increment a vote counter by 1."""
        self._adjust(answer_id, vote_type, 1)

    async def decrement_vote_count(
        self, answer_id: AnswerId, vote_type: VoteType
    ) -> None:
        """Decrement a vote counter by 1 (minimum 0)."""
        self._adjust(answer_id, vote_type, -1)

    def _adjust(self, answer_id: AnswerId, vote_type: VoteType, delta: int) -> None:
        answer = self._db.answers.get(answer_id)
        if answer is None:
            return
        field = "upvote_count" if vote_type == VoteType.UPVOTE else "downvote_count"
        value = max(0, getattr(answer, field) + delta)
        self._db.answers[answer_id] = answer.model_copy(update={field: value})
