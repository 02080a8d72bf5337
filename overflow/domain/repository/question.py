"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from overflow.domain.model.question import Question
from overflow.domain.value import QuestionId, VoteType


class QuestionOrder(str, Enum):
    """Base ordering for question listings."""

    NEWEST = "newest"  # asked_at DESC
    ACTIVE = "active"  # most recent answer (or ask time) DESC
    UNANSWERED = "unanswered"  # no answers, asked_at DESC

    @classmethod
    def parse(cls, value: str | None) -> "QuestionOrder":
        """Parse a client-supplied order, falling back to NEWEST."""
        try:
            return cls(value)
        except ValueError:
            return cls.NEWEST


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Questions are always returned with their tags and answers populated,
    answers in the order they were posted.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, order: QuestionOrder = QuestionOrder.NEWEST
    ) -> list[Question]:
        """Find all questions in the given base ordering.

        Args:
            order: Base ordering (UNANSWERED also filters out answered questions)

        Returns:
            Ordered list of questions, empty when there are none
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update), including its tag links.

        Answers are not written here; they reference the question by ID.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter by 1."""
        pass

    @abstractmethod
    async def increment_vote_count(
        self, question_id: QuestionId, vote_type: VoteType
    ) -> None:
        """Atomically increment the upvote or downvote counter by 1."""
        pass

    @abstractmethod
    async def decrement_vote_count(
        self, question_id: QuestionId, vote_type: VoteType
    ) -> None:
        """Atomically decrement the upvote or downvote counter by 1 (minimum 0)."""
        pass
