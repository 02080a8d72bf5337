"""Unit tests for the in-memory question repository."""

import pytest

from overflow.domain.repository import QuestionOrder
from overflow.domain.value import VoteType
from overflow.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryDatabase,
    InMemoryQuestionRepository,
)
from tests.conftest import NOW, days_ago, make_answer, make_question


@pytest.fixture
def database():
    return InMemoryDatabase()


@pytest.fixture
def question_repo(database):
    return InMemoryQuestionRepository(database)


@pytest.fixture
def answer_repo(database):
    return InMemoryAnswerRepository(database)


class TestQuestionOrderParse:
    """Tests for QuestionOrder.parse."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("newest", QuestionOrder.NEWEST),
            ("active", QuestionOrder.ACTIVE),
            ("unanswered", QuestionOrder.UNANSWERED),
            ("popular", QuestionOrder.NEWEST),
            (None, QuestionOrder.NEWEST),
        ],
    )
    def test_unknown_values_fall_back_to_newest(self, value, expected):
        assert QuestionOrder.parse(value) == expected


class TestFindAll:
    """Tests for find_all orderings."""

    @pytest.mark.asyncio
    async def test_active_ties_keep_storage_order(self, question_repo):
        """Questions with equal activity stay in the order they were stored."""
        # Arrange
        first = await question_repo.save(make_question(title="first", asked_at=NOW))
        second = await question_repo.save(make_question(title="second", asked_at=NOW))

        # Act
        result = await question_repo.find_all(QuestionOrder.ACTIVE)

        # Assert
        assert [q.id for q in result] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_unanswered_excludes_answered_questions(
        self, question_repo, answer_repo
    ):
        """Only questions without answers are listed, newest first."""
        # Arrange
        answered = await question_repo.save(make_question(asked_at=days_ago(1)))
        await answer_repo.save(make_answer(answered.id))
        old = await question_repo.save(make_question(asked_at=days_ago(3)))
        new = await question_repo.save(make_question(asked_at=days_ago(2)))

        # Act
        result = await question_repo.find_all(QuestionOrder.UNANSWERED)

        # Assert
        assert [q.id for q in result] == [new.id, old.id]


class TestCounters:
    """Tests for view and vote counters."""

    @pytest.mark.asyncio
    async def test_decrement_never_goes_below_zero(self, question_repo):
        # Arrange
        question = await question_repo.save(make_question())

        # Act
        await question_repo.decrement_vote_count(question.id, VoteType.UPVOTE)

        # Assert
        stored = await question_repo.find_by_id(question.id)
        assert stored.upvote_count == 0

    @pytest.mark.asyncio
    async def test_increment_views(self, question_repo):
        # Arrange
        question = await question_repo.save(make_question())

        # Act
        await question_repo.increment_views(question.id)
        await question_repo.increment_views(question.id)

        # Assert
        stored = await question_repo.find_by_id(question.id)
        assert stored.views == 2
