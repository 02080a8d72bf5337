"""List questions use case."""

from uuid import UUID

from pydantic import BaseModel

from overflow.domain.model import User
from overflow.domain.repository.user import UserRepository
from overflow.domain.repository.question import QuestionOrder
from overflow.domain.service import QuestionService
from overflow.domain.value import UserId

from .views import QuestionView


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    order: str | None = None  # Unknown values fall back to newest
    search: str = ""
    user_id: str | None = None  # Set when the caller is authenticated


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionView]


class ListQuestionsUseCase:
    """Use case for listing, ordering and searching questions."""

    def __init__(
        self, question_service: QuestionService, user_repository: UserRepository
    ) -> None:
        self.question_service = question_service
        self.user_repository = user_repository

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow."""
        order = QuestionOrder.parse(request.order)
        questions = await self.question_service.get_questions(order, request.search)

        voter: User | None = None
        if request.user_id:
            voter = await self.user_repository.find_by_id(UserId(UUID(request.user_id)))

        return ListQuestionsResponse(
            questions=[QuestionView.from_domain(q, voter) for q in questions]
        )
