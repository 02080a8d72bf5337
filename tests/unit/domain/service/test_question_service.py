"""Unit tests for QuestionService."""

from uuid import uuid4

import pytest

from overflow.domain.error import NotFoundError
from overflow.domain.repository import (
    AnswerRepository,
    QuestionOrder,
    QuestionRepository,
    TagRepository,
)
from overflow.domain.service import QuestionService
from overflow.domain.value import QuestionId, TagName
from tests.conftest import days_ago, make_answer, make_question, make_tag
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestGetQuestions:
    """Tests for get_questions ordering and search."""

    @pytest.mark.asyncio
    async def test_active_ranks_recent_answer_above_older_question(self, unit_env):
        """A question answered yesterday outranks one asked two days ago."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        q1 = make_question(title="Q1", asked_at=days_ago(2))
        q2 = make_question(title="Q2", asked_at=days_ago(5))
        await question_repo.save(q1)
        await question_repo.save(q2)
        await answer_repo.save(make_answer(q2.id, answered_at=days_ago(1)))

        # Act
        result = await service.get_questions(QuestionOrder.ACTIVE)

        # Assert
        assert [q.title for q in result] == ["Q2", "Q1"]

    @pytest.mark.asyncio
    async def test_newest_sorts_by_ask_time_descending(self, unit_env):
        """Newest order ignores answers entirely."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        old = make_question(title="Old", asked_at=days_ago(3))
        new = make_question(title="New", asked_at=days_ago(1))
        await question_repo.save(old)
        await question_repo.save(new)
        await answer_repo.save(make_answer(old.id, answered_at=days_ago(0)))

        # Act
        result = await service.get_questions(QuestionOrder.NEWEST)

        # Assert
        assert [q.title for q in result] == ["New", "Old"]

    @pytest.mark.asyncio
    async def test_unanswered_with_every_question_answered_is_empty(self, unit_env):
        """Unanswered order returns an empty list, not an error."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        for title in ("A", "B"):
            question = make_question(title=title)
            await question_repo.save(question)
            await answer_repo.save(make_answer(question.id))

        # Act
        result = await service.get_questions(QuestionOrder.UNANSWERED)

        # Assert
        assert result == []

    @pytest.mark.asyncio
    async def test_tag_search_returns_tagged_questions_in_base_order(self, unit_env):
        """[javascript] keeps exactly the two tagged questions, newest first."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        tag_repo = await unit_env.get(TagRepository)

        js = await tag_repo.save(make_tag("javascript"))
        py = await tag_repo.save(make_tag("python"))
        older = make_question(title="Older JS", tags=[js], asked_at=days_ago(4))
        python = make_question(title="Python", tags=[py], asked_at=days_ago(2))
        newer = make_question(title="Newer JS", tags=[js], asked_at=days_ago(1))
        for question in (older, python, newer):
            await question_repo.save(question)

        # Act
        result = await service.get_questions(QuestionOrder.NEWEST, "[javascript]")

        # Assert
        assert [q.title for q in result] == ["Newer JS", "Older JS"]

    @pytest.mark.asyncio
    async def test_questions_come_back_with_tags_and_answers(self, unit_env):
        """Listed questions carry their tags and answers."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        question = make_question(tags=[make_tag("react")])
        await question_repo.save(question)
        answer = await answer_repo.save(make_answer(question.id))

        # Act
        [result] = await service.get_questions()

        # Assert
        assert result.tag_names == ["react"]
        assert [a.id for a in result.answers] == [answer.id]


class TestViewQuestion:
    """Tests for view_question."""

    @pytest.mark.asyncio
    async def test_counts_view_and_reverses_answers(self, unit_env):
        """Viewing increments views and lists newest answers first."""
        # Arrange
        service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        question = make_question()
        await question_repo.save(question)
        first = await answer_repo.save(make_answer(question.id, days_ago(2)))
        second = await answer_repo.save(make_answer(question.id, days_ago(1)))

        # Act
        result = await service.view_question(question.id)

        # Assert
        assert result.views == 1
        assert [a.id for a in result.answers] == [second.id, first.id]
        stored = await question_repo.find_by_id(question.id)
        assert stored.views == 1

    @pytest.mark.asyncio
    async def test_missing_question_raises_not_found(self, unit_env):
        """Viewing an unknown question raises NotFoundError."""
        # Arrange
        service = await unit_env.get(QuestionService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Question not found"):
            await service.view_question(QuestionId(uuid4()))


class TestAddQuestion:
    """Tests for add_question."""

    @pytest.mark.asyncio
    async def test_reuses_existing_tags_and_creates_new_ones(self, unit_env):
        """Known tag names are reused; unknown ones are created once."""
        # Arrange
        service = await unit_env.get(QuestionService)
        tag_repo = await unit_env.get(TagRepository)
        existing = await tag_repo.save(make_tag("react"))

        # Act
        question = await service.add_question(
            title="Hooks",
            text="How do hooks work?",
            tag_names=[TagName("react"), TagName("hooks"), TagName("react")],
            asked_by="alice",
        )

        # Assert
        assert question.tag_names == ["react", "hooks"]
        assert question.tags[0].id == existing.id
        assert await tag_repo.find_by_name(TagName("hooks")) is not None
        assert question.views == 0
        assert question.answers == []
