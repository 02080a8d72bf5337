"""Answer domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from overflow.domain.model.answer import Answer
from overflow.domain.repository.answer import AnswerRepository
from overflow.domain.repository.question import QuestionRepository
from overflow.domain.value import AnswerId, QuestionId

from .base import Service


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_repository: Question repository
        """
        self.answer_repository = answer_repository
        self.question_repository = question_repository

    async def add_answer(
        self,
        question_id: QuestionId,
        text: str,
        answered_by: str,
        answered_at: datetime,
    ) -> Answer:
        """Store an answer to a question.

        The answer is written first and kept even if the question turns out
        not to exist. The question lookup afterwards only decides whether an
        orphaned answer gets logged as a warning.

        Args:
            question_id: Question being answered
            text: Answer body
            answered_by: Author's username
            answered_at: Answer time as reported by the client

        Returns:
            The saved answer
        """
        with logfire.span(
            "answer_service.add_answer",
            question_id=str(question_id),
            answered_by=answered_by,
        ):
            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                text=text,
                answered_by=answered_by,
                answered_at=answered_at,
                upvote_count=0,
                downvote_count=0,
            )
            saved = await self.answer_repository.save(answer)

            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn(
                    "Answer stored for non-existent question",
                    answer_id=str(saved.id),
                    question_id=str(question_id),
                )
            else:
                logfire.info(
                    "Answer added",
                    answer_id=str(saved.id),
                    question_id=str(question_id),
                )

            return saved
