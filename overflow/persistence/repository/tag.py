"""PostgreSQL implementation of Tag repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from overflow.domain.model.tag import Tag
from overflow.domain.repository.tag import TagRepository
from overflow.domain.value import TagName
from overflow.persistence.mappers import row_to_tag, tag_to_dict
from overflow.persistence.tables import question_tags_table, tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Save a new tag."""
        stmt = insert(tags_table).values(**tag_to_dict(tag))
        await self.session.execute(stmt)
        await self.session.flush()
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def count_questions_per_tag(self) -> list[tuple[Tag, int]]:
        """Count questions per tag, skipping unused tags."""
        qcnt = func.count(question_tags_table.c.question_id).label("qcnt")
        stmt = (
            select(tags_table.c.id, tags_table.c.name, qcnt)
            .join(question_tags_table, question_tags_table.c.tag_id == tags_table.c.id)
            .group_by(tags_table.c.id, tags_table.c.name)
            .order_by(tags_table.c.name)
        )
        result = await self.session.execute(stmt)
        return [
            (row_to_tag({"id": row.id, "name": row.name}), row.qcnt)
            for row in result.fetchall()
        ]
