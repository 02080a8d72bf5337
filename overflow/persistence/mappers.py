"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from overflow.domain.model import Answer, Question, Tag, User, VoteEntry
from overflow.domain.value import (
    AnswerId,
    QuestionId,
    TagId,
    TagName,
    UserId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(id=TagId(_uuid(row["id"])), name=TagName(row["name"]))


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {"id": tag.id, "name": tag.name.root}


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        text=row["text"],
        answered_by=row["answered_by"],
        answered_at=row["answered_at"],
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return {
        "id": answer.id,
        "question_id": answer.question_id,
        "text": answer.text,
        "answered_by": answer.answered_by,
        "answered_at": answer.answered_at,
        "upvote_count": answer.upvote_count,
        "downvote_count": answer.downvote_count,
    }


def row_to_question(
    row: Dict[str, Any], tags: list[Tag], answers: list[Answer]
) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Question row as dict
        tags: Tags linked through question_tags, in link order
        answers: Answers referencing the question, oldest first

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        text=row["text"],
        tags=tags,
        answers=answers,
        asked_by=row["asked_by"],
        asked_at=row["asked_at"],
        views=row["views"],
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Tags and answers live in their own tables and are excluded.
    """
    return {
        "id": question.id,
        "title": question.title,
        "text": question.text,
        "asked_by": question.asked_by,
        "asked_at": question.asked_at,
        "views": question.views,
        "upvote_count": question.upvote_count,
        "downvote_count": question.downvote_count,
    }


def row_to_user(
    row: Dict[str, Any],
    voted_questions: list[VoteEntry],
    voted_answers: list[VoteEntry],
) -> User:
    """Convert database row plus ledger entries to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        voted_questions=voted_questions,
        voted_answers=voted_answers,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict (ledgers excluded)."""
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_vote_entry(row: Dict[str, Any]) -> VoteEntry:
    """Convert a votes row to a ledger entry."""
    return VoteEntry(
        target_id=_uuid(row["target_id"]), vote_type=VoteType(row["vote_type"])
    )
