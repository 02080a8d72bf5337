"""Create question use case."""

import logfire
from pydantic import BaseModel

from overflow.domain.error import RateLimitExceededError
from overflow.domain.service import QuestionService, RateLimitService
from overflow.domain.value import TagName

from .views import QuestionView


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    text: str
    tag_names: list[str]
    asked_by: str  # Username of the authenticated user


class CreateQuestionUseCase:
    """Use case for posting a new question, subject to the rate limit."""

    def __init__(
        self,
        question_service: QuestionService,
        rate_limit_service: RateLimitService,
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            rate_limit_service: Posting rate limiter
        """
        self.question_service = question_service
        self.rate_limit_service = rate_limit_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionView:
        """Execute create question flow.

        Steps:
        1. Check the author's rate limit
        2. Create the question, creating unknown tags on the way
        3. Record the post time for the author

        Args:
            request: Create question request

        Returns:
            The created question

        Raises:
            RateLimitExceededError: If the author posted within the window
        """
        with logfire.span(
            "create_question.execute",
            asked_by=request.asked_by,
            tags=request.tag_names,
        ):
            decision = self.rate_limit_service.can_user_post(request.asked_by)
            if not decision.allowed:
                raise RateLimitExceededError(
                    decision.error or "Too many requests",
                    decision.retry_after_seconds,
                )

            question = await self.question_service.add_question(
                title=request.title,
                text=request.text,
                tag_names=[TagName(name) for name in request.tag_names],
                asked_by=request.asked_by,
            )

            self.rate_limit_service.record_post(request.asked_by)

            return QuestionView.from_domain(question)
