"""In-memory question repository for testing."""

from typing import Optional

from overflow.domain.model import Question
from overflow.domain.repository.question import QuestionOrder, QuestionRepository
from overflow.domain.value import QuestionId, VoteType

from .database import InMemoryDatabase


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    def _populate(self, question: Question) -> Question:
        answers = [a for a in self._db.answers.values() if a.question_id == question.id]
        return question.model_copy(update={"answers": answers})

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        question = self._db.questions.get(question_id)
        return self._populate(question) if question else None

    async def find_all(
        self, order: QuestionOrder = QuestionOrder.NEWEST
    ) -> list[Question]:
        """Find all questions in the given base ordering."""
        questions = [self._populate(q) for q in self._db.questions.values()]

        if order == QuestionOrder.ACTIVE:
            # sorted() is stable, ties keep storage order
            questions.sort(key=lambda q: q.most_recent_activity, reverse=True)
        elif order == QuestionOrder.UNANSWERED:
            questions = [q for q in questions if not q.has_answers]
            questions.sort(key=lambda q: q.asked_at, reverse=True)
        else:
            questions.sort(key=lambda q: q.asked_at, reverse=True)

        return questions

    async def save(self, question: Question) -> Question:
        """Save or update a question."""
        self._db.questions[question.id] = question.model_copy(update={"answers": []})
        return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Increment views by 1."""
        question = self._db.questions.get(question_id)
        if question:
            self._db.questions[question_id] = question.model_copy(
                update={"views": question.views + 1}
            )

    async def increment_vote_count(
        self, question_id: QuestionId, vote_type: VoteType
    ) -> None:
        """Increment a vote counter by 1."""
        self._adjust(question_id, vote_type, 1)

    async def decrement_vote_count(
        self, question_id: QuestionId, vote_type: VoteType
    ) -> None:
        """Decrement a vote counter by 1 (minimum 0)."""
        self._adjust(question_id, vote_type, -1)

    def _adjust(self, question_id: QuestionId, vote_type: VoteType, delta: int) -> None:
        question = self._db.questions.get(question_id)
        if question is None:
            return
        field = "upvote_count" if vote_type == VoteType.UPVOTE else "downvote_count"
        value = max(0, getattr(question, field) + delta)
        self._db.questions[question_id] = question.model_copy(update={field: value})
