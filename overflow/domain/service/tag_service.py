"""Tag domain service."""

from uuid import uuid4

import logfire

from overflow.domain.model.tag import Tag
from overflow.domain.repository.tag import TagRepository
from overflow.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def find_or_create_tags(self, tag_names: list[TagName]) -> list[Tag]:
        """Resolve tag names to tags, creating the ones that don't exist yet.

        Duplicate names collapse to one tag; the first-seen order is kept.

        Args:
            tag_names: Requested tag names

        Returns:
            One tag per distinct name, in request order
        """
        unique_names: list[TagName] = []
        for name in tag_names:
            if name not in unique_names:
                unique_names.append(name)

        with logfire.span(
            "tag_service.find_or_create_tags", tags=[n.root for n in unique_names]
        ):
            existing = await self.tag_repository.find_by_names(unique_names)
            by_name = {tag.name.root: tag for tag in existing}

            tags = []
            for name in unique_names:
                tag = by_name.get(name.root)
                if tag is None:
                    tag = await self.tag_repository.save(
                        Tag(id=TagId(uuid4()), name=name)
                    )
                    logfire.info("Tag created", tag_name=name.root)
                tags.append(tag)

            return tags

    async def get_tags_with_question_count(self) -> list[tuple[Tag, int]]:
        """Get every tag in use with the number of questions carrying it."""
        with logfire.span("tag_service.get_tags_with_question_count"):
            counts = await self.tag_repository.count_questions_per_tag()
            logfire.info("Tag counts retrieved", count=len(counts))
            return counts
