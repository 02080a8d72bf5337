"""Get question use case."""

from uuid import UUID

from pydantic import BaseModel

from overflow.domain.model import User
from overflow.domain.repository.user import UserRepository
from overflow.domain.service import QuestionService
from overflow.domain.value import QuestionId, UserId

from .views import QuestionView


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string
    user_id: str | None = None  # Set when the caller is authenticated


class GetQuestionUseCase:
    """Use case for opening a question page.

    Counts a view and returns answers newest first.
    """

    def __init__(
        self, question_service: QuestionService, user_repository: UserRepository
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            user_repository: User repository, for the caller's vote
        """
        self.question_service = question_service
        self.user_repository = user_repository

    async def execute(self, request: GetQuestionRequest) -> QuestionView:
        """Execute get question flow.

        Args:
            request: Get question request

        Returns:
            The question after its view was counted

        Raises:
            NotFoundError: If the question doesn't exist
        """
        question = await self.question_service.view_question(
            QuestionId(UUID(request.question_id))
        )

        voter: User | None = None
        if request.user_id:
            voter = await self.user_repository.find_by_id(UserId(UUID(request.user_id)))

        return QuestionView.from_domain(question, voter)
