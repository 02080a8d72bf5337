"""Tag use cases."""

from .list_tags_with_counts import (
    ListTagsWithCountsResponse,
    ListTagsWithCountsUseCase,
    TagCount,
)

__all__ = [
    "ListTagsWithCountsResponse",
    "ListTagsWithCountsUseCase",
    "TagCount",
]
