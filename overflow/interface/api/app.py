"""FastAPI application."""

import asyncio
import contextlib
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from overflow.config import Settings
from overflow.domain.service import RateLimitService
from overflow.interface.api.errors import register_error_handlers
from overflow.interface.api.routes import answers, health, questions, tags, users
from overflow.util.di.container import create_container, setup_di
from overflow.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run the rate limit sweeper for the lifetime of the app."""
    container: AsyncContainer = app.state.dishka_container
    rate_limit_service = await container.get(RateLimitService)

    sweeper = asyncio.create_task(rate_limit_service.run_sweeper())
    logfire.info("Rate limit sweeper started")
    try:
        yield
    finally:
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper
        await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container is built
            when omitted

    Returns:
        The configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Fake Stack Overflow API",
        description="Backend API for a question and answer forum",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
