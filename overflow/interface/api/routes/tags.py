"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from overflow.application.usecase.tag import ListTagsWithCountsUseCase, TagCount

router = APIRouter(
    prefix="/tag",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "/getTagsWithQuestionNumber",
    response_model=list[TagCount],
    summary="List tags with question counts",
    description="Every tag used by at least one question, with its usage count.",
)
async def get_tags_with_question_number(
    use_case: FromDishka[ListTagsWithCountsUseCase],
) -> list[TagCount]:
    """List tags with the number of questions using each.

    Returns:
        ``[{name, qcnt}]`` ordered by tag name

    Example:
        GET /tag/getTagsWithQuestionNumber
    """
    with logfire.span("api.get_tags_with_question_number"):
        response = await use_case.execute()
        return response.tags
