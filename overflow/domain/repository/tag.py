"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from overflow.domain.model.tag import Tag
from overflow.domain.value import TagName


class TagRepository(ABC):
    """Repository interface for Tag entity."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save a new tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name.

        Args:
            name: Tag name

        Returns:
            Tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            List of found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def count_questions_per_tag(self) -> list[tuple[Tag, int]]:
        """Count questions per tag.

        Returns:
            (tag, question count) pairs for tags used by at least one
            question, ordered by tag name
        """
        pass
