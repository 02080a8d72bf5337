"""Question routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from overflow.application.usecase.auth import GetCurrentUserUseCase
from overflow.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
    QuestionView,
)
from overflow.application.usecase.vote import VoteQuestionUseCase, VoteRequest
from overflow.domain.error import NotFoundError, RateLimitExceededError
from overflow.domain.value import VoteType
from overflow.interface.api.auth import optional_user, require_user

router = APIRouter(prefix="/question", tags=["questions"], route_class=DishkaRoute)


class TagInput(BaseModel):
    """Tag reference in a new question."""

    name: str = Field(min_length=1, max_length=20)


class AddQuestionAPIRequest(BaseModel):
    """API request for creating a question."""

    title: str = Field(min_length=1, max_length=100)
    text: str = Field(min_length=1)
    tags: list[TagInput] = Field(min_length=1)


def _not_found(e: NotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"error": f"{e.resource} not found"},
    )


@router.post(
    "/addQuestion",
    response_model=QuestionView,
    status_code=status.HTTP_201_CREATED,
)
async def add_question(
    request: AddQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> QuestionView:
    """Create a new question.

    Requires authentication. The author is the authenticated user.

    Raises:
        HTTPException: 401 if not authenticated, 429 if the author posted
            within the rate limit window
    """
    user = await require_user(authorization, get_current_user_use_case)

    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                title=request.title,
                text=request.text,
                tag_names=[tag.name for tag in request.tags],
                asked_by=user.username,
            )
        )
    except RateLimitExceededError as e:
        logfire.warn(
            "Question rejected by rate limit",
            username=user.username,
            retry_after=e.retry_after_seconds,
        )
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail={"error": str(e)},
            headers={"Retry-After": str(e.retry_after_seconds)},
        )
    except ValueError as e:
        logfire.warn("Question creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Validation failed",
                "errors": [
                    {
                        "path": ".body.tags",
                        "message": str(e),
                        "errorCode": "format.openapi.validation",
                    }
                ],
            },
        )


@router.get("/getQuestion", response_model=list[QuestionView])
async def get_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    order: str = "newest",
    search: str = "",
    authorization: str | None = Header(default=None),
) -> list[QuestionView]:
    """List questions in the requested order, filtered by a search string.

    Example:
        GET /question/getQuestion?order=active&search=[react] hooks
    """
    user = await optional_user(authorization, get_current_user_use_case)

    with logfire.span("api.get_questions", order=order, search=search):
        response = await list_questions_use_case.execute(
            ListQuestionsRequest(
                order=order,
                search=search,
                user_id=user.user_id if user else None,
            )
        )
        return response.questions


@router.get("/getQuestionById/{qid}", response_model=QuestionView)
async def get_question_by_id(
    qid: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> QuestionView:
    """Fetch one question and count the view."""
    user = await optional_user(authorization, get_current_user_use_case)

    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(
                question_id=qid, user_id=user.user_id if user else None
            )
        )
    except NotFoundError as e:
        raise _not_found(e)
    except ValueError:
        # Malformed UUIDs can't name an existing question
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "Question not found"},
        )


async def _vote(
    qid: str,
    vote_type: VoteType,
    vote_use_case: VoteQuestionUseCase,
    get_current_user_use_case: GetCurrentUserUseCase,
    authorization: str | None,
) -> QuestionView:
    user = await require_user(authorization, get_current_user_use_case)

    try:
        return await vote_use_case.execute(
            VoteRequest(
                target_id=qid,
                vote_type=vote_type,
                user_id=user.user_id,
            )
        )
    except NotFoundError as e:
        raise _not_found(e)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": "Question not found"},
        )


@router.post("/{qid}/upvote", response_model=QuestionView)
async def upvote_question(
    qid: str,
    vote_use_case: FromDishka[VoteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> QuestionView:
    """Toggle the caller's upvote on a question."""
    return await _vote(
        qid, VoteType.UPVOTE, vote_use_case, get_current_user_use_case, authorization
    )


@router.post("/{qid}/downvote", response_model=QuestionView)
async def downvote_question(
    qid: str,
    vote_use_case: FromDishka[VoteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> QuestionView:
    """Toggle the caller's downvote on a question."""
    return await _vote(
        qid,
        VoteType.DOWNVOTE,
        vote_use_case,
        get_current_user_use_case,
        authorization,
    )
