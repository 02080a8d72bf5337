"""Response shapes shared by question, answer and vote use cases.

Field aliases keep the wire names the web client reads (``_id``,
``ask_date_time``, ``upvoteCount``...).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from overflow.domain.model import Answer, Question, Tag, User
from overflow.domain.value import VoteTarget, VoteType


class TagView(BaseModel):
    """Tag as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    name: str

    @classmethod
    def from_domain(cls, tag: Tag) -> "TagView":
        return cls(id=str(tag.id), name=tag.name.root)


class AnswerView(BaseModel):
    """Answer as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    text: str
    ans_by: str
    ans_date_time: datetime
    upvote_count: int = Field(serialization_alias="upvoteCount")
    downvote_count: int = Field(serialization_alias="downvoteCount")

    @classmethod
    def from_domain(cls, answer: Answer) -> "AnswerView":
        return cls(
            id=str(answer.id),
            text=answer.text,
            ans_by=answer.answered_by,
            ans_date_time=answer.answered_at,
            upvote_count=answer.upvote_count,
            downvote_count=answer.downvote_count,
        )


class QuestionView(BaseModel):
    """Question as returned to clients, tags and answers included.

    ``user_vote`` is the caller's current vote when the request was
    authenticated, otherwise null.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(serialization_alias="_id")
    title: str
    text: str
    tags: list[TagView]
    answers: list[AnswerView]
    asked_by: str
    ask_date_time: datetime
    views: int
    upvote_count: int = Field(serialization_alias="upvoteCount")
    downvote_count: int = Field(serialization_alias="downvoteCount")
    user_vote: VoteType | None = Field(default=None, serialization_alias="userVote")

    @classmethod
    def from_domain(
        cls, question: Question, voter: User | None = None
    ) -> "QuestionView":
        user_vote = None
        if voter is not None:
            entry = voter.find_vote(VoteTarget.QUESTION, question.id)
            user_vote = entry.vote_type if entry else None

        return cls(
            id=str(question.id),
            title=question.title,
            text=question.text,
            tags=[TagView.from_domain(tag) for tag in question.tags],
            answers=[AnswerView.from_domain(answer) for answer in question.answers],
            asked_by=question.asked_by,
            ask_date_time=question.asked_at,
            views=question.views,
            upvote_count=question.upvote_count,
            downvote_count=question.downvote_count,
            user_vote=user_vote,
        )
