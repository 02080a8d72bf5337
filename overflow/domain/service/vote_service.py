"""Vote domain service.

Each user keeps a ledger of their votes, one list for questions and one for
answers, with at most one entry per target. Voting works as a toggle:

- no entry: record the vote and bump the matching counter
- same vote again: remove the entry and lower the counter (never below 0)
- opposite vote: nothing changes; the first vote has to be removed first
"""

from uuid import UUID

import logfire

from overflow.domain.error import NotFoundError
from overflow.domain.model.answer import Answer
from overflow.domain.model.question import Question
from overflow.domain.model.user import VoteEntry
from overflow.domain.repository.answer import AnswerRepository
from overflow.domain.repository.question import QuestionRepository
from overflow.domain.repository.user import UserRepository
from overflow.domain.value import AnswerId, QuestionId, UserId, VoteTarget, VoteType

from .base import Service


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            user_repository: User repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.user_repository = user_repository

    async def apply_vote(
        self,
        user_id: UserId,
        target_id: UUID,
        vote_type: VoteType,
        target: VoteTarget,
    ) -> None:
        """Apply a vote from a user to a question or answer.

        Args:
            user_id: Voting user
            target_id: Question or answer ID
            vote_type: Upvote or downvote
            target: Whether ``target_id`` names a question or an answer

        Raises:
            NotFoundError: If the target or the user doesn't exist; nothing
                is written in that case
        """
        with logfire.span(
            "vote_service.apply_vote",
            user_id=str(user_id),
            target=target.value,
            target_id=str(target_id),
            vote_type=vote_type.value,
        ):
            if not await self._target_exists(target, target_id):
                logfire.warn(
                    "Vote on non-existent target",
                    target=target.value,
                    target_id=str(target_id),
                )
                raise NotFoundError(target.value.capitalize(), str(target_id))

            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Vote by non-existent user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            existing = user.find_vote(target, target_id)

            if existing is None:
                entries = [
                    *user.ledger(target),
                    VoteEntry(target_id=target_id, vote_type=vote_type),
                ]
                await self._increment(target, target_id, vote_type)
                logfire.info("Vote recorded", vote_type=vote_type.value)
            elif existing.vote_type == vote_type:
                entries = [
                    entry
                    for entry in user.ledger(target)
                    if entry.target_id != target_id
                ]
                await self._decrement(target, target_id, vote_type)
                logfire.info("Vote withdrawn", vote_type=vote_type.value)
            else:
                entries = list(user.ledger(target))
                logfire.info(
                    "Opposite vote ignored",
                    existing=existing.vote_type.value,
                    requested=vote_type.value,
                )

            await self.user_repository.save(user.with_ledger(target, entries))

    async def _vote_question(
        self, question_id: QuestionId, user_id: UserId, vote_type: VoteType
    ) -> Question:
        """Toggle a vote on a question and return it as it now stands."""
        await self.apply_vote(user_id, question_id, vote_type, VoteTarget.QUESTION)
        question = await self.question_repository.find_by_id(question_id)
        if question is None:
            raise NotFoundError("Question", str(question_id))
        return question

    async def _vote_answer(
        self, answer_id: AnswerId, user_id: UserId, vote_type: VoteType
    ) -> Answer:
        """Toggle a vote on an answer and return it as it now stands."""
        await self.apply_vote(user_id, answer_id, vote_type, VoteTarget.ANSWER)
        answer = await self.answer_repository.find_by_id(answer_id)
        if answer is None:
            raise NotFoundError("Answer", str(answer_id))
        return answer

    async def upvote_question(
        self, question_id: QuestionId, user_id: UserId
    ) -> Question:
        return await self._vote_question(question_id, user_id, VoteType.UPVOTE)

    async def downvote_question(
        self, question_id: QuestionId, user_id: UserId
    ) -> Question:
        return await self._vote_question(question_id, user_id, VoteType.DOWNVOTE)

    async def upvote_answer(self, answer_id: AnswerId, user_id: UserId) -> Answer:
        return await self._vote_answer(answer_id, user_id, VoteType.UPVOTE)

    async def downvote_answer(self, answer_id: AnswerId, user_id: UserId) -> Answer:
        return await self._vote_answer(answer_id, user_id, VoteType.DOWNVOTE)

    async def _target_exists(self, target: VoteTarget, target_id: UUID) -> bool:
        if target == VoteTarget.QUESTION:
            found = await self.question_repository.find_by_id(QuestionId(target_id))
        else:
            found = await self.answer_repository.find_by_id(AnswerId(target_id))
        return found is not None

    async def _increment(
        self, target: VoteTarget, target_id: UUID, vote_type: VoteType
    ) -> None:
        if target == VoteTarget.QUESTION:
            await self.question_repository.increment_vote_count(
                QuestionId(target_id), vote_type
            )
        else:
            await self.answer_repository.increment_vote_count(
                AnswerId(target_id), vote_type
            )

    async def _decrement(
        self, target: VoteTarget, target_id: UUID, vote_type: VoteType
    ) -> None:
        if target == VoteTarget.QUESTION:
            await self.question_repository.decrement_vote_count(
                QuestionId(target_id), vote_type
            )
        else:
            await self.answer_repository.decrement_vote_count(
                AnswerId(target_id), vote_type
            )
