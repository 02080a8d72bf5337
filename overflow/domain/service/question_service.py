"""Question domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from overflow.domain.error import NotFoundError
from overflow.domain.model.common import utcnow
from overflow.domain.model.question import Question
from overflow.domain.repository.question import QuestionOrder, QuestionRepository
from overflow.domain.value import QuestionId, TagName

from .base import Service
from .search import filter_questions
from .tag_service import TagService


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            tag_service: Tag domain service
        """
        self.question_repository = question_repository
        self.tag_service = tag_service

    async def get_questions(
        self, order: QuestionOrder = QuestionOrder.NEWEST, search: str = ""
    ) -> list[Question]:
        """List questions in a base order, filtered by a search string.

        Args:
            order: Base ordering
            search: Keywords and ``[tag]`` filters; empty means no filtering

        Returns:
            Matching questions in base order (possibly empty)
        """
        with logfire.span(
            "question_service.get_questions", order=order.value, search=search
        ):
            questions = await self.question_repository.find_all(order)
            matched = filter_questions(questions, search)
            logfire.info(
                "Questions retrieved", total=len(questions), matched=len(matched)
            )
            return matched

    async def view_question(self, question_id: QuestionId) -> Question:
        """Record a view and return the question with newest answers first.

        Args:
            question_id: Question ID

        Returns:
            The question after the view was counted

        Raises:
            NotFoundError: If the question doesn't exist
        """
        with logfire.span(
            "question_service.view_question", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                logfire.warn(
                    "View of non-existent question", question_id=str(question_id)
                )
                raise NotFoundError("Question", str(question_id))

            await self.question_repository.increment_views(question_id)

            return question.model_copy(
                update={
                    "views": question.views + 1,
                    "answers": list(reversed(question.answers)),
                }
            )

    async def add_question(
        self,
        title: str,
        text: str,
        tag_names: list[TagName],
        asked_by: str,
        asked_at: datetime | None = None,
    ) -> Question:
        """Create a question, creating any tags it names that don't exist yet.

        Args:
            title: Question title
            text: Question body
            tag_names: Tag names
            asked_by: Author's username
            asked_at: Ask time (defaults to now)

        Returns:
            The saved question
        """
        with logfire.span(
            "question_service.add_question",
            title=title,
            tags=[t.root for t in tag_names],
            asked_by=asked_by,
        ):
            tags = await self.tag_service.find_or_create_tags(tag_names)

            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                text=text,
                tags=tags,
                answers=[],
                asked_by=asked_by,
                asked_at=asked_at or utcnow(),
                views=0,
                upvote_count=0,
                downvote_count=0,
            )
            saved = await self.question_repository.save(question)
            logfire.info("Question created", question_id=str(saved.id))
            return saved
