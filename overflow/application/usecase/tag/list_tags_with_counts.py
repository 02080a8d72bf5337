"""List tags with question counts use case."""

import logfire
from pydantic import BaseModel

from overflow.domain.service import TagService


class TagCount(BaseModel):
    """Tag name with the number of questions using it."""

    name: str
    qcnt: int


class ListTagsWithCountsResponse(BaseModel):
    """List tags with counts response."""

    tags: list[TagCount]


class ListTagsWithCountsUseCase:
    """Use case for the tag overview page."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self) -> ListTagsWithCountsResponse:
        """Execute list tags with counts flow.

        Returns:
            Every tag used by at least one question, ordered by name
        """
        with logfire.span("list_tags_with_counts.execute"):
            counts = await self.tag_service.get_tags_with_question_count()
            return ListTagsWithCountsResponse(
                tags=[TagCount(name=tag.name.root, qcnt=qcnt) for tag, qcnt in counts]
            )
