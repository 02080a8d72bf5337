"""Domain layer DI providers."""

from dishka import Scope, provide

from overflow.config import AuthSettings, RateLimitSettings
from overflow.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    RateLimitStore,
    TagRepository,
    UserRepository,
)
from overflow.domain.service import (
    AnswerService,
    JWTService,
    QuestionService,
    RateLimitService,
    TagService,
    UserService,
    VoteService,
)
from overflow.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    The rate limiter is APP-scoped: its window outlives any single request.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository, tag_service=tag_service
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
        )

    @provide
    def get_vote_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        user_repository: UserRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            user_repository=user_repository,
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_rate_limit_service(
        self, store: RateLimitStore, rate_limit_settings: RateLimitSettings
    ) -> RateLimitService:
        """Provide the process-wide posting rate limiter."""
        return RateLimitService(
            store=store, window_seconds=rate_limit_settings.window_seconds
        )
