"""Unit tests for vote, answer and tag use cases."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from overflow.application.usecase.answer import AddAnswerRequest, AddAnswerUseCase
from overflow.application.usecase.question import (
    AnswerView,
    CreateQuestionRequest,
    CreateQuestionUseCase,
    QuestionView,
)
from overflow.application.usecase.tag import ListTagsWithCountsUseCase
from overflow.application.usecase.vote import (
    VoteAnswerUseCase,
    VoteQuestionUseCase,
    VoteRequest,
)
from overflow.domain.error import NotFoundError
from overflow.domain.service import UserService
from overflow.domain.value import VoteType
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _ask(unit_env, tags: list[str]) -> QuestionView:
    create = await unit_env.get(CreateQuestionUseCase)
    return await create.execute(
        CreateQuestionRequest(
            title="Generators",
            text="When should I use yield?",
            tag_names=tags,
            asked_by=f"asker-{uuid4().hex[:6]}",
        )
    )


class TestVoteQuestionUseCase:
    """Tests for VoteQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_vote_returns_counts_and_callers_vote(self, unit_env):
        """The response carries the new counters and the vote just cast."""
        # Arrange
        use_case = await unit_env.get(VoteQuestionUseCase)
        user_service = await unit_env.get(UserService)
        question = await _ask(unit_env, ["python"])
        user = await user_service.register("dave", "dave@example.com", "secret1")
        request = VoteRequest(
            target_id=question.id, vote_type=VoteType.UPVOTE, user_id=str(user.id)
        )

        # Act
        cast = await use_case.execute(request)
        withdrawn = await use_case.execute(request)

        # Assert
        assert cast.upvote_count == 1
        assert cast.user_vote == VoteType.UPVOTE
        assert withdrawn.upvote_count == 0
        assert withdrawn.user_vote is None

    @pytest.mark.asyncio
    async def test_unknown_question_raises_not_found(self, unit_env):
        """A vote on a missing question raises NotFoundError."""
        # Arrange
        use_case = await unit_env.get(VoteQuestionUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.register("dave", "dave@example.com", "secret1")

        # Act & Assert
        with pytest.raises(NotFoundError, match="Question not found"):
            await use_case.execute(
                VoteRequest(
                    target_id=str(uuid4()),
                    vote_type=VoteType.DOWNVOTE,
                    user_id=str(user.id),
                )
            )


class TestVoteAnswerUseCase:
    """Tests for VoteAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_answer_vote_returns_answer_view(self, unit_env):
        """Voting on an answer returns the answer with new counts."""
        # Arrange
        use_case = await unit_env.get(VoteAnswerUseCase)
        add_answer = await unit_env.get(AddAnswerUseCase)
        user_service = await unit_env.get(UserService)
        question = await _ask(unit_env, ["python"])
        answer = await add_answer.execute(
            AddAnswerRequest(
                question_id=question.id,
                text="Use yield for lazy sequences",
                answered_by="erin",
                answered_at=datetime.now(timezone.utc),
            )
        )
        user = await user_service.register("dave", "dave@example.com", "secret1")

        # Act
        result = await use_case.execute(
            VoteRequest(
                target_id=answer.id,
                vote_type=VoteType.DOWNVOTE,
                user_id=str(user.id),
            )
        )

        # Assert
        assert isinstance(result, AnswerView)
        assert result.downvote_count == 1

    @pytest.mark.asyncio
    async def test_unknown_target_raises_not_found(self, unit_env):
        """A vote on a missing answer raises NotFoundError."""
        # Arrange
        use_case = await unit_env.get(VoteAnswerUseCase)
        user_service = await unit_env.get(UserService)
        user = await user_service.register("dave", "dave@example.com", "secret1")

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer not found"):
            await use_case.execute(
                VoteRequest(
                    target_id=str(uuid4()),
                    vote_type=VoteType.UPVOTE,
                    user_id=str(user.id),
                )
            )


class TestAddAnswerUseCase:
    """Tests for AddAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_returns_answer_with_client_fields(self, unit_env):
        """The view exposes the answer in the client's field names."""
        # Arrange
        use_case = await unit_env.get(AddAnswerUseCase)
        question = await _ask(unit_env, ["python"])
        answered_at = datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)

        # Act
        result = await use_case.execute(
            AddAnswerRequest(
                question_id=question.id,
                text="Generators are lazy",
                answered_by="erin",
                answered_at=answered_at,
            )
        )

        # Assert
        body = result.model_dump(by_alias=True)
        assert body["text"] == "Generators are lazy"
        assert body["ans_by"] == "erin"
        assert body["ans_date_time"] == answered_at
        assert body["upvoteCount"] == 0
        assert "_id" in body


class TestListTagsWithCountsUseCase:
    """Tests for ListTagsWithCountsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_name_and_qcnt(self, unit_env):
        """Every used tag is reported with its question count."""
        # Arrange
        use_case = await unit_env.get(ListTagsWithCountsUseCase)
        await _ask(unit_env, ["python", "generators"])
        await _ask(unit_env, ["python"])

        # Act
        response = await use_case.execute()

        # Assert
        assert [(t.name, t.qcnt) for t in response.tags] == [
            ("generators", 1),
            ("python", 2),
        ]
