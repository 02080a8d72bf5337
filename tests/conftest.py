"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

# Cheap hashes and a fixed secret for every test run
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")

from overflow.domain.model import Answer, Question, Tag  # noqa: E402
from overflow.domain.value import AnswerId, QuestionId, TagId, TagName  # noqa: E402

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def days_ago(days: float) -> datetime:
    """Timestamp relative to the fixed test clock."""
    return NOW - timedelta(days=days)


def make_tag(name: str) -> Tag:
    return Tag(id=TagId(uuid4()), name=TagName(name))


def make_question(
    title: str = "How do closures work?",
    text: str = "Some body text",
    tags: list[Tag] | None = None,
    asked_at: datetime | None = None,
    asked_by: str = "alice",
) -> Question:
    """Build an unanswered question with sensible defaults."""
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        text=text,
        tags=tags or [],
        answers=[],
        asked_by=asked_by,
        asked_at=asked_at or NOW,
    )


def make_answer(
    question_id: QuestionId,
    answered_at: datetime | None = None,
    text: str = "An answer",
    answered_by: str = "bob",
) -> Answer:
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        text=text,
        answered_by=answered_by,
        answered_at=answered_at or NOW,
    )
