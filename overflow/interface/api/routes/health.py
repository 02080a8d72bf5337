"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from overflow.config import RateLimitSettings, Settings
from overflow.domain.model.common import utcnow

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    environment: str
    version: str
    git_sha: str
    post_window_seconds: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    rate_limit_settings: FromDishka[RateLimitSettings],
) -> HealthResponse:
    """Report that the API is up, with build and posting-limit details."""
    return HealthResponse(
        status="healthy",
        timestamp=utcnow(),
        environment=settings.environment,
        version="0.1.0",
        git_sha=settings.git_sha,
        post_window_seconds=rate_limit_settings.window_seconds,
    )
