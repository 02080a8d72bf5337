"""Question aggregate root."""

from datetime import datetime

from pydantic import Field

from overflow.domain.model.answer import Answer
from overflow.domain.model.common import DomainModel, Timestamp, utcnow
from overflow.domain.model.tag import Tag
from overflow.domain.value import QuestionId


class Question(DomainModel):
    """Question aggregate root.

    Business rules:
    - Views only ever increase
    - Vote counters never go below zero
    - Answers are kept in the order they were posted
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=100)
    text: str = Field(min_length=1)
    tags: list[Tag] = Field(default_factory=list)
    answers: list[Answer] = Field(default_factory=list)
    asked_by: str = Field(min_length=1)
    asked_at: Timestamp = Field(default_factory=utcnow)
    views: int = Field(default=0, ge=0)
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)

    @property
    def tag_names(self) -> list[str]:
        """Names of the attached tags."""
        return [tag.name.root for tag in self.tags]

    @property
    def has_answers(self) -> bool:
        """Whether anyone has answered the question."""
        return bool(self.answers)

    @property
    def most_recent_activity(self) -> datetime:
        """Latest answer timestamp, or the ask time for unanswered questions."""
        if not self.answers:
            return self.asked_at
        return max(answer.answered_at for answer in self.answers)
