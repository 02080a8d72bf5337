"""Application layer DI providers."""

from dishka import Scope, provide

from overflow.application.usecase.answer import AddAnswerUseCase
from overflow.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from overflow.application.usecase.question import (
    CreateQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from overflow.application.usecase.tag import ListTagsWithCountsUseCase
from overflow.application.usecase.vote import VoteAnswerUseCase, VoteQuestionUseCase
from overflow.domain.repository import UserRepository
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self,
        question_service: QuestionService,
        rate_limit_service: RateLimitService,
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service,
            rate_limit_service=rate_limit_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService, user_repository: UserRepository
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, user_repository=user_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService, user_repository: UserRepository
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, user_repository=user_repository
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_add_answer_use_case(
        self, answer_service: AnswerService
    ) -> AddAnswerUseCase:
        """Provide add answer use case."""
        return AddAnswerUseCase(answer_service=answer_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_vote_question_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> VoteQuestionUseCase:
        """Provide vote question use case."""
        return VoteQuestionUseCase(
            vote_service=vote_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_answer_use_case(
        self, vote_service: VoteService
    ) -> VoteAnswerUseCase:
        """Provide vote answer use case."""
        return VoteAnswerUseCase(vote_service=vote_service)

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_with_counts_use_case(
        self, tag_service: TagService
    ) -> ListTagsWithCountsUseCase:
        """Provide list tags with counts use case."""
        return ListTagsWithCountsUseCase(tag_service=tag_service)
