"""Answer routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status
from pydantic import BaseModel, Field

from overflow.application.usecase.answer import AddAnswerRequest, AddAnswerUseCase
from overflow.application.usecase.auth import GetCurrentUserUseCase
from overflow.application.usecase.question import AnswerView
from overflow.application.usecase.vote import VoteAnswerUseCase, VoteRequest
from overflow.domain.error import NotFoundError
from overflow.domain.value import VoteType
from overflow.interface.api.auth import require_user

router = APIRouter(prefix="/answer", tags=["answers"], route_class=DishkaRoute)


class AnswerInput(BaseModel):
    """Answer body as sent by the client."""

    text: str = Field(min_length=1)
    ans_by: str = Field(min_length=1)
    ans_date_time: datetime


class AddAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    qid: str
    ans: AnswerInput


@router.post("/addAnswer", response_model=AnswerView)
async def add_answer(
    request: AddAnswerAPIRequest,
    add_answer_use_case: FromDishka[AddAnswerUseCase],
) -> AnswerView:
    """Answer a question.

    The answer is stored even when ``qid`` names no question.
    """
    try:
        return await add_answer_use_case.execute(
            AddAnswerRequest(
                question_id=request.qid,
                text=request.ans.text,
                answered_by=request.ans.ans_by,
                answered_at=request.ans.ans_date_time,
            )
        )
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Validation failed",
                "errors": [
                    {
                        "path": ".body.qid",
                        "message": "must be a valid question id",
                        "errorCode": "format.openapi.validation",
                    }
                ],
            },
        )


async def _vote(
    aid: str,
    vote_type: VoteType,
    vote_use_case: VoteAnswerUseCase,
    get_current_user_use_case: GetCurrentUserUseCase,
    authorization: str | None,
) -> AnswerView:
    user = await require_user(authorization, get_current_user_use_case)

    try:
        return await vote_use_case.execute(
            VoteRequest(
                target_id=aid,
                vote_type=vote_type,
                user_id=user.user_id,
            )
        )
    except (NotFoundError, ValueError) as e:
        resource = e.resource if isinstance(e, NotFoundError) else "Answer"
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error": f"{resource} not found"},
        )


@router.post("/{aid}/upvote", response_model=AnswerView)
async def upvote_answer(
    aid: str,
    vote_use_case: FromDishka[VoteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AnswerView:
    """Toggle the caller's upvote on an answer."""
    return await _vote(
        aid, VoteType.UPVOTE, vote_use_case, get_current_user_use_case, authorization
    )


@router.post("/{aid}/downvote", response_model=AnswerView)
async def downvote_answer(
    aid: str,
    vote_use_case: FromDishka[VoteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AnswerView:
    """Toggle the caller's downvote on an answer."""
    return await _vote(
        aid,
        VoteType.DOWNVOTE,
        vote_use_case,
        get_current_user_use_case,
        authorization,
    )
