"""PostgreSQL implementation of Answer repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from overflow.domain.model import Answer
from overflow.domain.repository.answer import AnswerRepository
from overflow.domain.value import AnswerId, VoteType
from overflow.persistence.mappers import answer_to_dict, row_to_answer
from overflow.persistence.repository.question import vote_column
from overflow.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create)."""
        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def increment_vote_count(
        self, answer_id: AnswerId, vote_type: VoteType
    ) -> None:
        """Atomically increment a vote counter by 1."""
        column = vote_column(answers_table, vote_type)
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values({column: column + 1})
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_vote_count(
        self, answer_id: AnswerId, vote_type: VoteType
    ) -> None:
        """Atomically decrement a vote counter by 1 (minimum 0)."""
        column = vote_column(answers_table, vote_type)
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .where(column > 0)  # Don't go below 0
            .values({column: column - 1})
        )
        await self.session.execute(stmt)
        await self.session.flush()
