"""Integration tests for the Postgres repositories.

Run against a migrated database with ``RUN_INTEGRATION=1`` and
``DATABASE__URL`` pointing at it.
"""

import os
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from overflow.domain.repository import QuestionOrder, QuestionRepository
from overflow.domain.service import (
    AnswerService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from overflow.domain.value import TagName, VoteType
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_INTEGRATION") != "1",
    reason="needs a running postgres (set RUN_INTEGRATION=1)",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _unique(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:8]}"


class TestQuestionPersistence:
    """Questions, tags and answers round trip through postgres."""

    @pytest.mark.asyncio
    async def test_question_loads_with_tags_and_answers(self, integration_env):
        # Arrange
        question_service = await integration_env.get(QuestionService)
        answer_service = await integration_env.get(AnswerService)
        repository = await integration_env.get(QuestionRepository)
        tag_name = _unique("pg")

        question = await question_service.add_question(
            title="Does the mapper keep tags?",
            text="Checking tag and answer loading",
            tag_names=[TagName(tag_name)],
            asked_by="alice",
        )
        await answer_service.add_answer(
            question.id,
            "It does",
            "bob",
            datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

        # Act
        loaded = await repository.find_by_id(question.id)

        # Assert
        assert [tag.name.root for tag in loaded.tags] == [tag_name]
        assert [answer.text for answer in loaded.answers] == ["It does"]
        assert loaded.asked_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_views_and_vote_counters(self, integration_env):
        # Arrange
        question_service = await integration_env.get(QuestionService)
        repository = await integration_env.get(QuestionRepository)
        question = await question_service.add_question(
            title="Counters",
            text="Views and votes",
            tag_names=[TagName(_unique("pg"))],
            asked_by="alice",
        )

        # Act
        await repository.increment_views(question.id)
        await repository.increment_vote_count(question.id, VoteType.UPVOTE)
        await repository.decrement_vote_count(question.id, VoteType.DOWNVOTE)

        # Assert
        stored = await repository.find_by_id(question.id)
        assert stored.views == 1
        assert stored.upvote_count == 1
        assert stored.downvote_count == 0

    @pytest.mark.asyncio
    async def test_search_by_tag_finds_question(self, integration_env):
        # Arrange
        question_service = await integration_env.get(QuestionService)
        tag_name = _unique("pg")
        question = await question_service.add_question(
            title="Searchable",
            text="Found by tag",
            tag_names=[TagName(tag_name)],
            asked_by="alice",
        )

        # Act
        found = await question_service.get_questions(
            QuestionOrder.NEWEST, f"[{tag_name}]"
        )

        # Assert
        assert [q.id for q in found] == [question.id]


class TestTagPersistence:
    """Tag lookup and counting."""

    @pytest.mark.asyncio
    async def test_find_or_create_reuses_existing_tag(self, integration_env):
        # Arrange
        tag_service = await integration_env.get(TagService)
        name = TagName(_unique("pg"))

        # Act
        first = await tag_service.find_or_create_tags([name])
        second = await tag_service.find_or_create_tags([name])

        # Assert
        assert first[0].id == second[0].id


class TestUserVotePersistence:
    """Vote ledgers survive a save and reload."""

    @pytest.mark.asyncio
    async def test_vote_is_recorded_on_user(self, integration_env):
        # Arrange
        question_service = await integration_env.get(QuestionService)
        user_service = await integration_env.get(UserService)
        vote_service = await integration_env.get(VoteService)
        username = _unique("voter")
        user = await user_service.register(
            username, f"{username}@example.com", "secret1"
        )
        question = await question_service.add_question(
            title="Vote me",
            text="Ledger check",
            tag_names=[TagName(_unique("pg"))],
            asked_by="alice",
        )

        # Act
        await vote_service.upvote_question(question.id, user.id)

        # Assert
        reloaded = await user_service.get_by_id(user.id)
        assert [entry.target_id for entry in reloaded.voted_questions] == [
            question.id
        ]
