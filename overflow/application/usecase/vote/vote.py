"""Vote use cases."""

from uuid import UUID

from pydantic import BaseModel

from overflow.application.usecase.question.views import AnswerView, QuestionView
from overflow.domain.service import UserService, VoteService
from overflow.domain.value import AnswerId, QuestionId, UserId, VoteType


class VoteRequest(BaseModel):
    """Vote request."""

    target_id: str  # UUID string
    vote_type: VoteType
    user_id: str  # User ID from authenticated user


class VoteQuestionUseCase:
    """Use case for toggling an upvote or downvote on a question."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize vote question use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service, to read back the voter's ledger
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: VoteRequest) -> QuestionView:
        """Execute vote flow.

        Args:
            request: Vote request

        Returns:
            The question with updated counters and the voter's current vote

        Raises:
            NotFoundError: If the question or the user doesn't exist
            ValueError: If an ID is not a UUID
        """
        question_id = QuestionId(UUID(request.target_id))
        user_id = UserId(UUID(request.user_id))

        if request.vote_type == VoteType.UPVOTE:
            question = await self.vote_service.upvote_question(question_id, user_id)
        else:
            question = await self.vote_service.downvote_question(question_id, user_id)

        voter = await self.user_service.get_by_id(user_id)
        return QuestionView.from_domain(question, voter)


class VoteAnswerUseCase:
    """Use case for toggling an upvote or downvote on an answer."""

    def __init__(self, vote_service: VoteService) -> None:
        self.vote_service = vote_service

    async def execute(self, request: VoteRequest) -> AnswerView:
        """Execute vote flow.

        Raises:
            NotFoundError: If the answer or the user doesn't exist
            ValueError: If an ID is not a UUID
        """
        answer_id = AnswerId(UUID(request.target_id))
        user_id = UserId(UUID(request.user_id))

        if request.vote_type == VoteType.UPVOTE:
            answer = await self.vote_service.upvote_answer(answer_id, user_id)
        else:
            answer = await self.vote_service.downvote_answer(answer_id, user_id)

        return AnswerView.from_domain(answer)
