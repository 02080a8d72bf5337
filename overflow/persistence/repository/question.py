"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, desc, exists, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from overflow.domain.model import Answer, Question, Tag
from overflow.domain.repository.question import QuestionOrder, QuestionRepository
from overflow.domain.value import QuestionId, VoteType
from overflow.persistence.mappers import (
    question_to_dict,
    row_to_answer,
    row_to_question,
    row_to_tag,
)
from overflow.persistence.tables import (
    answers_table,
    question_tags_table,
    questions_table,
    tags_table,
)


def vote_column(table, vote_type: VoteType):
    """Counter column matching a vote type."""
    if vote_type == VoteType.UPVOTE:
        return table.c.upvote_count
    return table.c.downvote_count


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags(self, question_ids: list[UUID]) -> dict[UUID, list[Tag]]:
        """Fetch tags for multiple questions in a single query."""
        if not question_ids:
            return {}

        stmt = (
            select(question_tags_table.c.question_id, tags_table)
            .select_from(question_tags_table)
            .join(tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .where(question_tags_table.c.question_id.in_(question_ids))
            .order_by(question_tags_table.c.position)
        )
        result = await self.session.execute(stmt)

        tag_map: dict[UUID, list[Tag]] = defaultdict(list)
        for row in result.fetchall():
            tag_map[row.question_id].append(row_to_tag(row._asdict()))
        return tag_map

    async def _fetch_answers(
        self, question_ids: list[UUID]
    ) -> dict[UUID, list[Answer]]:
        """Fetch answers for multiple questions in a single query, oldest first."""
        if not question_ids:
            return {}

        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id.in_(question_ids))
            .order_by(answers_table.c.created_at, answers_table.c.answered_at)
        )
        result = await self.session.execute(stmt)

        answer_map: dict[UUID, list[Answer]] = defaultdict(list)
        for row in result.fetchall():
            answer_map[row.question_id].append(row_to_answer(row._asdict()))
        return answer_map

    async def _build(self, rows) -> list[Question]:
        question_ids = [row.id for row in rows]
        tag_map = await self._fetch_tags(question_ids)
        answer_map = await self._fetch_answers(question_ids)
        return [
            row_to_question(
                row._asdict(),
                tags=tag_map.get(row.id, []),
                answers=answer_map.get(row.id, []),
            )
            for row in rows
        ]

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            questions = await self._build([row])
            return questions[0]

    async def find_all(
        self, order: QuestionOrder = QuestionOrder.NEWEST
    ) -> list[Question]:
        """Find all questions in the given base ordering."""
        with logfire.span("question_repository.find_all", order=order.value):
            stmt = select(questions_table)

            if order == QuestionOrder.ACTIVE:
                latest = (
                    select(
                        answers_table.c.question_id,
                        func.max(answers_table.c.answered_at).label("last_answer_at"),
                    )
                    .group_by(answers_table.c.question_id)
                    .subquery()
                )
                stmt = stmt.outerjoin(
                    latest, latest.c.question_id == questions_table.c.id
                ).order_by(
                    desc(
                        func.coalesce(
                            latest.c.last_answer_at, questions_table.c.asked_at
                        )
                    )
                )
            elif order == QuestionOrder.UNANSWERED:
                has_answer = exists().where(
                    answers_table.c.question_id == questions_table.c.id
                )
                stmt = stmt.where(~has_answer).order_by(
                    desc(questions_table.c.asked_at)
                )
            else:
                stmt = stmt.order_by(desc(questions_table.c.asked_at))

            result = await self.session.execute(stmt)
            rows = result.fetchall()

            if not rows:
                logfire.info("No questions found")
                return []

            questions = await self._build(rows)
            logfire.info("Found questions", count=len(questions))
            return questions

    async def save(self, question: Question) -> Question:
        """Save a question (create or update) with its tag links."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            tags=question.tag_names,
        ):
            question_dict = question_to_dict(question)

            exists_stmt = select(questions_table.c.id).where(
                questions_table.c.id == question.id
            )
            existing = (await self.session.execute(exists_stmt)).fetchone()

            if existing:
                stmt = (
                    update(questions_table)
                    .where(questions_table.c.id == question.id)
                    .values(**question_dict)
                )
                await self.session.execute(stmt)
                await self.session.execute(
                    delete(question_tags_table).where(
                        question_tags_table.c.question_id == question.id
                    )
                )
            else:
                await self.session.execute(
                    insert(questions_table).values(**question_dict)
                )

            for position, tag in enumerate(question.tags):
                await self.session.execute(
                    insert(question_tags_table).values(
                        question_id=question.id, tag_id=tag.id, position=position
                    )
                )

            await self.session.flush()
            return question

    async def increment_views(self, question_id: QuestionId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views=questions_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_vote_count(
        self, question_id: QuestionId, vote_type: VoteType
    ) -> None:
        """Atomically increment a vote counter by 1."""
        column = vote_column(questions_table, vote_type)
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values({column: column + 1})
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_vote_count(
        self, question_id: QuestionId, vote_type: VoteType
    ) -> None:
        """Atomically decrement a vote counter by 1 (minimum 0)."""
        column = vote_column(questions_table, vote_type)
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .where(column > 0)  # Don't go below 0
            .values({column: column - 1})
        )
        await self.session.execute(stmt)
        await self.session.flush()
