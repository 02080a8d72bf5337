"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from overflow.domain.model import User, VoteEntry
from overflow.domain.repository.user import UserRepository
from overflow.domain.value import UserId, VoteTarget
from overflow.persistence.mappers import row_to_user, row_to_vote_entry, user_to_dict
from overflow.persistence.tables import users_table, votes_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    The vote ledgers are stored as rows in the votes table.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, condition) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(condition))
        row = result.fetchone()
        if not row:
            return None

        votes_stmt = (
            select(votes_table)
            .where(votes_table.c.user_id == row.id)
            .order_by(votes_table.c.id)
        )
        vote_rows = (await self.session.execute(votes_stmt)).fetchall()

        ledgers: dict[VoteTarget, list[VoteEntry]] = {
            VoteTarget.QUESTION: [],
            VoteTarget.ANSWER: [],
        }
        for vote_row in vote_rows:
            ledgers[VoteTarget(vote_row.target)].append(
                row_to_vote_entry(vote_row._asdict())
            )

        return row_to_user(
            row._asdict(),
            voted_questions=ledgers[VoteTarget.QUESTION],
            voted_answers=ledgers[VoteTarget.ANSWER],
        )

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username."""
        return await self._find_one(users_table.c.username == username)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email."""
        return await self._find_one(users_table.c.email == email)

    async def save(self, user: User) -> User:
        """Save a user (create or update) and replace its ledger rows."""
        with logfire.span("user_repository.save", user_id=str(user.id)):
            user_dict = user_to_dict(user)

            exists_stmt = select(users_table.c.id).where(users_table.c.id == user.id)
            existing = (await self.session.execute(exists_stmt)).fetchone()

            if existing:
                await self.session.execute(
                    update(users_table)
                    .where(users_table.c.id == user.id)
                    .values(**user_dict)
                )
                await self.session.execute(
                    delete(votes_table).where(votes_table.c.user_id == user.id)
                )
            else:
                await self.session.execute(insert(users_table).values(**user_dict))

            for target in (VoteTarget.QUESTION, VoteTarget.ANSWER):
                for entry in user.ledger(target):
                    await self.session.execute(
                        insert(votes_table).values(
                            user_id=user.id,
                            target=target.value,
                            target_id=entry.target_id,
                            vote_type=entry.vote_type.value,
                        )
                    )

            await self.session.flush()
            return user
