"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from overflow.domain.model.answer import Answer
from overflow.domain.value import AnswerId, VoteType


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def increment_vote_count(
        self, answer_id: AnswerId, vote_type: VoteType
    ) -> None:
        """Atomically increment the upvote or downvote counter by 1."""
        pass

    @abstractmethod
    async def decrement_vote_count(
        self, answer_id: AnswerId, vote_type: VoteType
    ) -> None:
        """Atomically decrement the upvote or downvote counter by 1 (minimum 0)."""
        pass
