"""In-memory implementation of Tag repository for testing."""

from collections import Counter
from typing import Optional

from overflow.domain.model.tag import Tag
from overflow.domain.repository.tag import TagRepository
from overflow.domain.value import TagName

from .database import InMemoryDatabase


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def save(self, tag: Tag) -> Tag:
        """Save a tag."""
        self._db.tags[tag.id] = tag
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        return next((t for t in self._db.tags.values() if t.name == name), None)

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        tags = []
        for name in names:
            tag = await self.find_by_name(name)
            if tag:
                tags.append(tag)
        return tags

    async def count_questions_per_tag(self) -> list[tuple[Tag, int]]:
        """Count questions per tag, skipping unused tags."""
        counts = Counter(
            tag.id for question in self._db.questions.values() for tag in question.tags
        )
        used = [tag for tag in self._db.tags.values() if counts[tag.id] > 0]
        used.sort(key=lambda t: t.name.root)
        return [(tag, counts[tag.id]) for tag in used]
