"""Add answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from overflow.application.usecase.question.views import AnswerView
from overflow.domain.service import AnswerService
from overflow.domain.value import QuestionId


class AddAnswerRequest(BaseModel):
    """Add answer request."""

    question_id: str  # UUID string
    text: str
    answered_by: str
    answered_at: datetime


class AddAnswerUseCase:
    """Use case for answering a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize add answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: AddAnswerRequest) -> AnswerView:
        """Execute add answer flow.

        Args:
            request: Add answer request

        Returns:
            The stored answer
        """
        answer = await self.answer_service.add_answer(
            question_id=QuestionId(UUID(request.question_id)),
            text=request.text,
            answered_by=request.answered_by,
            answered_at=request.answered_at,
        )
        return AnswerView.from_domain(answer)
