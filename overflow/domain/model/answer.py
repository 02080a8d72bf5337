"""Answer entity."""

from pydantic import Field

from overflow.domain.model.common import DomainModel, Timestamp, utcnow
from overflow.domain.value import AnswerId, QuestionId


class Answer(DomainModel):
    """Answer to a question.

    ``question_id`` is a back-reference only; the question owns the ordering
    of its answers.
    """

    id: AnswerId
    question_id: QuestionId
    text: str = Field(min_length=1)
    answered_by: str = Field(min_length=1)
    answered_at: Timestamp = Field(default_factory=utcnow)
    upvote_count: int = Field(default=0, ge=0)
    downvote_count: int = Field(default=0, ge=0)
